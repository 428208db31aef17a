import io
import re

import pytest

from chartkit.logger import StdoutLogger, debug, debugf, info, infof

_RFC3339_UTC = r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d*[1-9])?Z"


def _make():
    out, err = io.StringIO(), io.StringIO()
    return StdoutLogger(stdout=out, stderr=err, time_format="TS"), out, err


def test_info_writes_level_and_arguments():
    log, out, _ = _make()
    log.info("hello", 3)
    assert out.getvalue() == "TS [INFO] hello 3\n"


def test_formatted_levels():
    log, out, _ = _make()
    log.infof("%s=%d", "a", 7)
    log.debugf("%v items", 4)
    log.errorf("bad %s", "thing")
    assert out.getvalue().splitlines() == [
        "TS [INFO] a=7",
        "TS [DEBUG] 4 items",
        "TS [ERROR] bad thing",
    ]


def test_percent_escape_in_format():
    log, out, _ = _make()
    log.infof("100%% of %v", "x")
    assert out.getvalue() == "TS [INFO] 100% of x\n"


def test_debug_and_error():
    log, out, _ = _make()
    log.debug("d")
    log.error("e", 1)
    assert out.getvalue() == "TS [DEBUG] d\nTS [ERROR] e 1\n"


def test_err_logs_message_and_ignores_none():
    log, out, _ = _make()
    log.err(None)
    assert out.getvalue() == ""
    log.err(ValueError("boom"))
    assert out.getvalue() == "TS [ERROR] boom\n"


def test_fatal_err_exits_with_status_one():
    log, out, _ = _make()
    with pytest.raises(SystemExit) as exc_info:
        log.fatal_err(RuntimeError("dead"))
    assert exc_info.value.code == 1
    assert out.getvalue() == "TS [FATAL] dead\n"


def test_fatal_err_none_does_nothing():
    log, out, _ = _make()
    log.fatal_err(None)
    assert out.getvalue() == ""


def test_errorln_goes_to_stderr():
    log, out, err = _make()
    log.errorln("oops")
    assert err.getvalue() == "TS oops\n"
    assert out.getvalue() == ""


def test_default_timestamp_is_rfc3339_utc():
    out = io.StringIO()
    StdoutLogger(stdout=out).println("x")
    stamp, rest = out.getvalue().split(" ", 1)
    assert rest == "x\n"
    assert stamp[-1] == "Z"
    match = re.fullmatch(_RFC3339_UTC, stamp)
    assert match is not None and match.group(0) == stamp


def test_default_streams_resolve_to_sys(capsys):
    StdoutLogger(time_format="TS").info("out")
    StdoutLogger(time_format="TS").errorln("err")
    captured = capsys.readouterr()
    assert captured.out == "TS [INFO] out\n"
    assert captured.err == "TS err\n"


def test_module_helpers_forward_to_logger():
    log, out, _ = _make()
    info(log, "a")
    infof(log, "%s", "b")
    debug(log, "c")
    debugf(log, "%d", 5)
    assert out.getvalue().splitlines() == [
        "TS [INFO] a",
        "TS [INFO] b",
        "TS [DEBUG] c",
        "TS [DEBUG] 5",
    ]


def test_module_helpers_ignore_missing_logger(capsys):
    info(None, "a")
    infof(None, "%s", "b")
    debug(None, "c")
    debugf(None, "%d", 5)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""