import io
import logging

import pytest

from wiremodels.__main__ import main, parse_params
from wiremodels.logging_config import setup_logging

pytestmark = pytest.mark.usefixtures("restore_logging")


def test_parse_params_coerces_field_types():
    params = parse_params("triangular-prism", ["n=3", "both_halves=false", "r=1.5"])
    assert params == {"n": 3, "both_halves": False, "r": 1.5}
    assert isinstance(params["n"], int)


@pytest.mark.parametrize("assignment", ["n", "sides=4", "both_halves=maybe"])
def test_parse_params_rejects(assignment):
    with pytest.raises(ValueError):
        parse_params("triangular-prism", [assignment])


def test_builds_and_prints(capsys):
    code = main(["triangular-pyramid", "-p", "subdivided=true", "-p", "n=2", "-p", "k=3"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Model: Triangular Pyramid(" in out
    assert "Model has 17 vertices." in out
    assert "Model has 24 primitives." in out


def test_handlers_outlive_captured_cli_run():
    # runs after test_builds_and_prints, whose captured stdout is closed by now
    handlers = logging.getLogger("wiremodels").handlers
    assert handlers
    for handler in handlers:
        assert not handler.stream.closed


def test_cone_sector_from_cli(capsys):
    assert main(["cone-sector", "-p", "n=3", "-p", "k=4"]) == 0
    out = capsys.readouterr().out
    assert "Model has 13 vertices." in out
    assert "Model has 21 primitives." in out


def test_invalid_parameter_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["triangular-prism", "-p", "n=-1"])
    assert exc.value.code == 2
    assert "n must be greater than or equal to 0" in capsys.readouterr().err


def test_unknown_kind_exits():
    with pytest.raises(SystemExit) as exc:
        main(["icosahedron"])
    assert exc.value.code == 2


def test_setup_logging_uses_given_stream():
    stream = io.StringIO()
    setup_logging(level=logging.WARNING, stream=stream)
    logging.getLogger("wiremodels.models").warning("ring count changed")
    logging.getLogger("wiremodels.models").info("not shown")
    assert "wiremodels.models - WARNING - ring count changed" in stream.getvalue()
    assert "not shown" not in stream.getvalue()
    assert len(logging.getLogger("wiremodels").handlers) == 1
