import json
import math

import pytest

from optkit import errors
from optkit.parser import ArgParser
from optkit.results import Operands, Options, Parameters, Result


def _result() -> Result:
    p = ArgParser({"tag": {"type": "list"}, "a": {"type": "flag"}})
    return p.parse(["-a", "--tag=x,y", "k=v", "op"])


def test_options_reject_mutation():
    opts = _result().options
    with pytest.raises(errors.ImmutableError):
        opts["b"] = True  # type: ignore
    with pytest.raises(errors.ImmutableError):
        del opts["a"]  # type: ignore
    with pytest.raises(errors.ImmutableError):
        opts.clear()
    with pytest.raises(errors.ImmutableError):
        opts.update({"a": False})
    with pytest.raises(errors.ImmutableError):
        opts.pop("a")
    assert opts == {"a": True, "tag": ["x", "y"]}


def test_parameters_reject_mutation():
    params = _result().parameters
    with pytest.raises(errors.ImmutableError):
        params["k"] = "w"  # type: ignore
    with pytest.raises(errors.ImmutableError):
        del params["k"]  # type: ignore
    with pytest.raises(errors.ImmutableError):
        params.clear()
    with pytest.raises(errors.ImmutableError):
        params.setdefault("j", "1")
    assert params == {"k": "v"}


def test_immutable_error_is_type_error():
    with pytest.raises(TypeError):
        _result().options["a"] = False  # type: ignore


def test_list_values_are_copies():
    opts = _result().options
    opts["tag"].append("z")  # type: ignore
    assert opts["tag"] == ["x", "y"]


def test_operands_are_a_tuple():
    operands = _result().operands
    assert isinstance(operands, tuple)
    assert operands == ("op",)
    with pytest.raises(TypeError):
        operands[0] = "other"  # type: ignore


def test_result_is_frozen():
    res = _result()
    with pytest.raises(AttributeError):
        res.options = Options()  # type: ignore


def test_mapping_api():
    opts = Options({"a": True, "n": 2})
    assert len(opts) == 2
    assert "a" in opts
    assert opts.get("b") is None
    assert list(opts.keys()) == ["a", "n"]
    assert list(opts.items()) == [("a", True), ("n", 2)]
    assert repr(opts) == "Options({'a': True, 'n': 2})"


def test_to_dict():
    res = _result()
    d = res.toDict()
    assert d == {
        "options": {"a": True, "tag": ["x", "y"]},
        "parameters": {"k": "v"},
        "operands": ["op"],
    }
    assert type(d["options"]) is dict
    assert type(d["parameters"]) is dict


def test_to_json():
    res = Result(Options({"n": 1}), Parameters({}), Operands(["x"]))
    assert json.loads(res.toJson()) == {
        "options": {"n": 1},
        "parameters": {},
        "operands": ["x"],
    }


def test_to_json_infinite_values_become_null():
    p = ArgParser({"n": {"type": "int"}, "v": {"type": "count"}})
    res = p.parse(["--n=Infinity", "--v=1e400"])
    assert res.options == {"n": math.inf, "v": math.inf}
    assert json.loads(res.toJson()) == {
        "options": {"n": None, "v": None},
        "parameters": {},
        "operands": [],
    }
    assert "Infinity" not in res.toJson()


def test_frozen_defaults_to_empty():
    assert len(Options()) == 0
    assert Parameters() == {}
    assert Options() is not Options()
