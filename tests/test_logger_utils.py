# tests/test_logger_utils.py
from word_completion.utils.logger_utils import Log


def test_write_creates_folder_and_filters_levels(tmp_path):
    path = tmp_path / "nested" / "app.log"
    log = Log(str(path), min_level="INFO")
    log.debug("hidden")
    log.info("shown")
    log.error("bad")
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert "INFO    | shown" in lines[0]
    assert "ERROR   | bad" in lines[1]


def test_time_block_records_metric(tmp_path):
    path = tmp_path / "app.log"
    log = Log(str(path))
    with log.time_block("work"):
        pass
    assert "work done:" in path.read_text(encoding="utf-8")


def test_echo(tmp_path, capsys):
    log = Log(str(tmp_path / "a.log"), echo=True, use_color=False)
    log.warning("careful")
    assert "WARNING | careful" in capsys.readouterr().out
