import pytest

from gematrix.context import GematriaContext
from gematrix.exceptions import GematrixError, UnknownMethodError
from gematrix.letters import ALPHABET, FINALS, lookup
from gematrix.methods import DEFAULT_METHOD, Method, reduce_digits

from _hebrew import SEGOL

def char_values(method, chars):
    ctx = GematriaContext(method=method)
    return [ctx.calculate_char_value(ch) for ch in chars]

def test_default_method_is_standard():
    assert DEFAULT_METHOD is Method.HECHRECHI

def test_keys_are_unique():
    keys = Method.keys()
    assert len(keys) == len(set(keys)) == len(Method)

@pytest.mark.parametrize("name,expected", [
    ("hechrechi", Method.HECHRECHI),
    ("standard", Method.HECHRECHI),
    ("Mispar-Hechrechi", Method.HECHRECHI),
    ("mispar_gadol", Method.GADOL),
    ("  KATAN ", Method.KATAN),
    ("ordinal", Method.SIDURI),
    ("boneh", Method.BONEH),
    ("otiyot-be-milui", Method.MILUI),
    ("OtiyotBeMilui", Method.MILUI),
    (Method.MUSAFI, Method.MUSAFI),
])
def test_from_name(name, expected):
    assert Method.from_name(name) is expected

@pytest.mark.parametrize("name", ["", "nope", "mispar", "meugal", None, 3])
def test_from_name_rejects_unknown(name):
    with pytest.raises(UnknownMethodError) as exc:
        Method.from_name(name)
    assert isinstance(exc.value, ValueError)
    assert isinstance(exc.value, GematrixError)
    assert "katan" in exc.value.available

def test_unknown_method_message_names_the_input():
    with pytest.raises(UnknownMethodError) as exc:
        Method.from_name("meugal")
    assert exc.value.name == "meugal"
    assert "'meugal'" in str(exc.value)
    assert "hechrechi" in str(exc.value)

@pytest.mark.parametrize("value,expected", [
    (0, 0), (1, 1), (9, 9), (10, 1), (18, 9), (90, 9), (376, 7), (400, 4), (900, 9),
])
def test_reduce_digits(value, expected):
    assert reduce_digits(value) == expected

def test_standard_values():
    assert char_values(Method.HECHRECHI, ALPHABET) == [
        1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 20, 30, 40, 50, 60, 70, 80, 90, 100, 200, 300, 400,
    ]
    assert char_values(Method.HECHRECHI, FINALS) == [20, 40, 50, 80, 90]

def test_gadol_final_forms():
    assert char_values(Method.GADOL, FINALS) == [500, 600, 700, 800, 900]
    assert char_values(Method.GADOL, "כמנפצ") == [20, 40, 50, 80, 90]

def test_katan_reduces_standard_value():
    assert char_values(Method.KATAN, "אטיכצקת") == [1, 9, 1, 2, 9, 1, 4]
    # Finals reduce their standard value, so they match the regular form.
    assert char_values(Method.KATAN, FINALS) == [2, 4, 5, 8, 9]
    assert char_values(Method.KATAN, "צץ") == [9, 9]

def test_siduri_is_ordinal_position():
    assert char_values(Method.SIDURI, ALPHABET) == list(range(1, 23))
    assert char_values(Method.SIDURI, FINALS) == [11, 13, 14, 17, 18]

def test_kidmi_is_cumulative_standard_value():
    assert char_values(Method.KIDMI, "אבגי") == [1, 3, 6, 55]
    assert char_values(Method.KIDMI, "כך") == [75, 75]
    assert char_values(Method.KIDMI, "ת") == [1495]

def test_milui_spells_out_letters():
    assert char_values(Method.MILUI, "אבגדה") == [111, 412, 83, 434, 6]
    assert char_values(Method.MILUI, "וישת") == [22, 20, 360, 416]
    assert char_values(Method.MILUI, "ך") == [100]

def test_musafi_adds_letter_count():
    ctx = GematriaContext(method=Method.MUSAFI)
    assert ctx.calculate_value("שלום") == 376 + 4

def test_boneh_sums_running_totals():
    ctx = GematriaContext(method=Method.BONEH)
    assert ctx.calculate_value("אב") == 1 + 3
    assert ctx.calculate_value("שלום") == 300 + 330 + 336 + 376
    assert ctx.calculate_value("") == 0

def test_nikkud_has_no_method_value():
    for method in Method:
        assert method.letter_value(lookup(SEGOL)) == 0

def test_str_is_key():
    assert str(Method.GADOL) == "gadol"
