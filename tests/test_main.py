"""Tests for the command line entry point."""

import json
import logging
import pytest

from main import create_demo_probes, main


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("geomprobe")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


class TestDemo:
    """Test the built-in demo probes."""

    def test_demo_results(self):
        results = {r.name: r for r in create_demo_probes().evaluate()}
        assert results['center-contained'].hit
        assert not results['outside-point'].hit
        assert results['head-on'].point is not None
        assert not results['orthogonal-miss'].hit
        assert not results['wrong-direction'].hit
        assert results['grazing'].hit
        assert results['tangent-line'].hit
        assert not results['missing-line'].hit
        assert results['nearest-of-group'].hit

    def test_demo_cli(self, capsys):
        assert main(['--demo']) == 0
        out = capsys.readouterr().out
        assert "head-on [ray]: hit at (0, 0, -1)" in out
        assert "orthogonal-miss [ray]: miss" in out


class TestProbeFile:
    """Test evaluating probe files from the command line."""

    def test_probe_file(self, tmp_path, capsys):
        path = tmp_path / "probes.json"
        path.write_text(json.dumps({
            'shapes': {'ball': {'type': 'unit_sphere'}},
            'queries': [{'name': 'q', 'shape': 'ball', 'point': [2, 0, 0]}],
        }))
        assert main([str(path)]) == 0
        assert "q [point]: miss" in capsys.readouterr().out

    def test_bad_probe_file(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({'shapes': {'s': {'type': 'sphere', 'radius': 0}}}))
        assert main([str(path)]) == 1
        assert "error:" in capsys.readouterr().err

    def test_missing_argument(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_log_file(self, tmp_path):
        log_path = tmp_path / "run.log"
        assert main(['--demo', '--log-level', 'INFO', '--log-file', str(log_path)]) == 0
        assert "queries hit" in log_path.read_text()
