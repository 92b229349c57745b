# tests/psm_cli/ui/test_ui_helpers.py
import io

import pytest
from rich.console import Console

from psm_cli.messages.json_rpc_message import Response
from psm_cli.ui.ui_helpers import print_response, print_usage_help


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=100, color_system=None)


def _out(console):
    return console.file.getvalue()


def test_error_response(console):
    res = Response.model_validate({"error": {"code": -32601, "message": "no such method"}})
    print_response(res, console)
    assert _out(console) == "Error -32601: no such method\n"


def test_error_without_message_uses_code_text(console):
    print_response(Response.model_validate({"error": {"code": -32601}}), console)
    assert _out(console).startswith("Error -32601: Method not found")


def test_scalar_results(console):
    print_response(Response(result="psm1"), console)
    print_response(Response(result=12), console)
    print_response(Response(result=True), console)
    assert _out(console).splitlines() == ["psm1", "12", "true"]


def test_none_result_prints_nothing(console):
    print_response(Response(result=None), console)
    assert _out(console) == ""


def test_list_result(console):
    print_response(Response(result=["a", 1, {"k": "v"}]), console)
    assert _out(console) == 'a\n1\n{\n    "k": "v"\n}\n\n'


def test_object_result(console):
    print_response(Response(result={"name": "[x]", "n": 2}), console)
    assert _out(console) == '{\n    "name": "[x]",\n    "n": 2\n}\n\n'


def test_usage_help_mentions_examples(console):
    print_usage_help(console)
    out = _out(console)
    assert "object updateByAid subscriber 1234 attr1=value1,attr2=value2" in out
    assert "commands:" in out
