"""Pytest configuration making the repository root importable."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from loguru import logger  # noqa: E402

from rnog_config.node import ConfigNode  # noqa: E402

ACQ_CFG = """\
# DAQ settings for one run
radiant = {
  scalers = {
    use_pps = true;
    period = 1.0;
  };
  trigger = {
    RF0 = {
      enabled = true;
      mask = [1, 2, 3];
    };
    RF1 = {
      enabled = false;
    };
  };
};
lt = {
  thresholds = (1.5, 2.5);
  comment = "handcarry";
};
"""


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path_factory):
    for name in ("LOGURU_LEVEL", "RNOG_CONFIG_STRICT"):
        monkeypatch.delenv(name, raising=False)
    # no settings layers unless a test writes them
    monkeypatch.setenv("RNOG_CONFIG_DIR", str(tmp_path_factory.mktemp("settings")))


@pytest.fixture
def log_records():
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG", format="{message}")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def station_tree():
    return ConfigNode.from_python({
        "radiant": {
            "scalers": {"use_pps": True, "period": 1.0},
            "trigger": {
                "RF0": {"enabled": True, "mask": [1, 2, 3]},
                "RF1": {"enabled": False},
            },
        },
        "lt": {"thresholds": (1.5, 2.5), "comment": "handcarry"},
    })


@pytest.fixture
def run_directory(tmp_path):
    cfg_dir = tmp_path / "station23" / "run327" / "cfg"
    cfg_dir.mkdir(parents=True)
    (cfg_dir / "acq.cfg").write_text(ACQ_CFG, encoding="utf-8")
    return tmp_path

