import pytest

from sdkm.sdk_version import Cache, CacheStorage, SDKVersion, SDKVersions, VersionType

S = VersionType.STABLE
U = VersionType.UNSTABLE
A = VersionType.ARCHIVED


@pytest.mark.parametrize(
    "model, expected",
    [
        (SDKVersion(), ""),
        (SDKVersion(id="1"), "1"),
        (SDKVersion(type=S), ""),
        (SDKVersion(type=U), ""),
        (SDKVersion(type=A), ""),
    ],
)
def test_print_strange_models(model, expected):
    assert model.print() == expected


@pytest.mark.parametrize(
    "model, expected",
    [
        (SDKVersion(), ""),
        (SDKVersion(id="1", type=S), "1"),
        (SDKVersion(id="1", type=S, installed=True), "1 [installed]"),
        (SDKVersion(id="1", type=U), "1 (unstable)"),
        (SDKVersion(id="1", type=U, installed=True), "1 (unstable) [installed]"),
        (SDKVersion(id="1", type=A), "1 (archived)"),
        (SDKVersion(id="1", type=A, installed=True), "1 (archived) [installed]"),
    ],
)
def test_print_correct_models(model, expected):
    assert model.print() == expected


_FLAG_SETS = [
    (False, False, False),
    (False, True, False),
    (False, True, True),
    (True, False, False),
    (True, True, False),
    (True, True, True),
]


@pytest.mark.parametrize("model", [SDKVersion(), SDKVersion(type=S), SDKVersion(type=U), SDKVersion(type=A)])
@pytest.mark.parametrize("flags", _FLAG_SETS)
def test_print_with_options_empty_id(model, flags):
    assert model.print_with_options(*flags) == ""


@pytest.mark.parametrize(
    "flags, expected",
    zip(_FLAG_SETS, ["1", "1", "1 [not installed]", "1", "1", "1 [not installed]"]),
)
def test_print_with_options_no_type(flags, expected):
    assert SDKVersion(id="1").print_with_options(*flags) == expected


@pytest.mark.parametrize(
    "flags, expected",
    zip(_FLAG_SETS, ["1", "1", "1 [not installed]", "1", "1", "1 [not installed]"]),
)
def test_print_with_options_stable(flags, expected):
    assert SDKVersion(id="1", type=S).print_with_options(*flags) == expected


@pytest.mark.parametrize(
    "flags, expected",
    zip(
        _FLAG_SETS,
        ["1", "1", "1 [not installed]", "1 (unstable)", "1 (unstable)", "1 (unstable) [not installed]"],
    ),
)
def test_print_with_options_unstable(flags, expected):
    assert SDKVersion(id="1", type=U).print_with_options(*flags) == expected


@pytest.mark.parametrize(
    "type_name, expected",
    [("stable", "1"), ("unstable", "1 (unstable)"), ("archived", "1 (archived)")],
)
def test_version_type_from_value_prints(type_name, expected):
    assert SDKVersion(id="1", type=VersionType(type_name)).print() == expected


@pytest.mark.parametrize("abstract", [Cache, CacheStorage, SDKVersions])
def test_interfaces_are_abstract(abstract):
    with pytest.raises(TypeError):
        abstract()