from types import SimpleNamespace

import pytest

from randfile.options import PARAMETERS, Options


def test_parameter_table():
    names = [spec.name for spec in PARAMETERS]
    assert names[:2] == ["name", "size"]
    assert all(spec.required for spec in PARAMETERS if spec.positional)
    interactive = next(spec for spec in PARAMETERS if spec.name == "interactive")
    assert interactive.default is True


def test_defaults():
    options = Options(name="f", size="1K")
    assert options.interactive is True
    assert options.overwrite is False
    assert options.patterns == ()
    assert options.create_kwargs()["patterns"] is None


def test_from_namespace():
    ns = SimpleNamespace(name="f", size="2K", interactive=False, overwrite=True,
                         random_bytes=False, patterns=["A", "B"], seed=3,
                         checksum=True, log_level="INFO")
    options = Options.from_namespace(ns)
    assert options.patterns == ("A", "B")
    assert options.seed == 3
    kwargs = options.create_kwargs()
    assert kwargs["patterns"] == ["A", "B"]
    assert kwargs["interactive"] is False
    assert kwargs["checksum"] is True


def test_validation():
    with pytest.raises(ValueError):
        Options(name="f", size="1K", patterns=("A", ""))
    with pytest.raises(ValueError):
        Options(name="f", size="1K", log_level="LOUD")
