import pytest

from semver32 import ErrorKind, MajorTooBig, MinorTooBig, Number, NumberError, PatchTooBig


def test_new_packs_components():
    assert int(Number.new(0, 1, 0)) == 256
    assert int(Number.new(1, 2, 3)) == 1 << 16 | 2 << 8 | 3
    assert Number.new(1) == Number.new(1, 0, 0)


def test_accessors(reference, reference_number):
    major, minor, patch = reference[:3]
    assert reference_number.major == major
    assert reference_number.minor == minor
    assert reference_number.patch == patch


def test_setters_replace_one_component(reference_number):
    assert reference_number.with_major(2).major == 2
    assert reference_number.with_minor(2).minor == 2
    assert reference_number.with_patch(2).patch == 2


def test_setters_preserve_other_components(reference_number):
    n = reference_number
    assert (n.with_major(7).minor, n.with_major(7).patch) == (n.minor, n.patch)
    assert (n.with_minor(7).major, n.with_minor(7).patch) == (n.major, n.patch)
    assert (n.with_patch(7).major, n.with_patch(7).minor) == (n.major, n.minor)


def test_setter_examples():
    n = Number.new(0, 1, 0)
    assert (int(n.with_major(1)), str(n.with_major(1))) == (65792, "1.1")
    assert (int(n.with_minor(2)), str(n.with_minor(2))) == (512, "0.2")
    assert (int(n.with_patch(1)), str(n.with_patch(1))) == (257, "0.1.1")
    assert int(n) == 256


def test_bump_major(reference, reference_number):
    major, _, _, fails = reference[:4]
    if fails:
        with pytest.raises(NumberError) as exc_info:
            reference_number.bump_major()
        assert exc_info.value.unwrap() == MajorTooBig("65536")
    else:
        assert reference_number.bump_major() == Number.new(major + 1, 0, 0)


def test_bump_minor(reference, reference_number):
    major, minor, _, _, fails = reference[:5]
    if fails:
        with pytest.raises(NumberError) as exc_info:
            reference_number.bump_minor()
        assert exc_info.value.unwrap() == MinorTooBig("256")
    else:
        assert reference_number.bump_minor() == Number.new(major, minor + 1, 0)


def test_bump_patch(reference, reference_number):
    major, minor, patch, _, _, fails = reference[:6]
    if fails:
        with pytest.raises(NumberError) as exc_info:
            reference_number.bump_patch()
        assert exc_info.value.unwrap() == PatchTooBig("256")
    else:
        assert reference_number.bump_patch() == Number.new(major, minor, patch + 1)


def test_bump_examples():
    n = Number.new(0, 1, 1)
    assert (int(n.bump_major()), str(n.bump_major())) == (65536, "1")
    assert (int(n.bump_minor()), str(n.bump_minor())) == (512, "0.2")
    assert (int(n.bump_patch()), str(n.bump_patch())) == (258, "0.1.2")


def test_bump_error_messages():
    with pytest.raises(NumberError, match='^semver32: major component is too big: "65536"$'):
        Number.new(65535).bump_major()
    with pytest.raises(NumberError) as exc_info:
        Number.new(0, 0, 255).bump_patch()
    assert exc_info.value.kind is ErrorKind.PATCH_TOO_BIG


@pytest.mark.parametrize(
    ("major", "minor", "patch"),
    [(65536, 0, 0), (0, 256, 0), (0, 0, 256), (-1, 0, 0)],
)
def test_new_rejects_out_of_range_components(major, minor, patch):
    with pytest.raises(ValueError):
        Number.new(major, minor, patch)


def test_setters_reject_out_of_range_components():
    n = Number.new(1, 2, 3)
    with pytest.raises(ValueError):
        n.with_major(65536)
    with pytest.raises(ValueError):
        n.with_minor(256)
    with pytest.raises(ValueError):
        n.with_patch(-1)
    with pytest.raises(TypeError):
        n.with_patch(1.5)


def test_packed_value_bounds():
    assert Number(0xFFFFFFFF) == Number.new(65535, 255, 255)
    with pytest.raises(ValueError):
        Number(1 << 32)
    with pytest.raises(ValueError):
        Number(-1)


def test_immutable_and_hashable():
    n = Number.new(1, 2, 3)
    with pytest.raises(AttributeError):
        n.value = 0  # type: ignore[misc]
    assert len({n, Number.new(1, 2, 3), Number.new(1, 2, 4)}) == 2


def test_string_renderings():
    n = Number(768)
    assert str(n) == "0.3"
    assert n.full() == "0.3.0"
    assert repr(n) == "Number('0.3.0')"
    assert f"{n:d} => {n}" == "768 => 0.3"
    assert f"{n:>5}" == "  0.3"
