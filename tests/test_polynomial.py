from algokit.polynomial import Polynomial, Term


def exponents(poly):
    return [term.expo for term in poly]


def test_insert_orders_by_descending_exponent():
    poly = Polynomial([(1, 0), (3, 4), (2, 2)])
    assert exponents(poly) == [4, 2, 0]


def test_equal_exponents_are_kept_in_insertion_order():
    poly = Polynomial()
    poly.insert(1, 2)
    poly.insert(5, 2)
    assert list(poly) == [Term(1.0, 2), Term(5.0, 2)]


def test_str_format():
    poly = Polynomial([(1.5, 2), (2, 1)])
    assert str(poly) == "(1.5x^2)+(2.0x^1)"


def test_empty_str():
    assert str(Polynomial()) == "empty list"


def test_add_combines_matching_exponents():
    first = Polynomial([(2, 3), (1, 1)])
    second = Polynomial([(4, 3), (5, 0)])
    total = first + second
    assert list(total) == [Term(6.0, 3), Term(1.0, 1), Term(5.0, 0)]


def test_add_with_empty_is_identity():
    poly = Polynomial([(3, 2), (1, 0)])
    assert list(poly + Polynomial()) == list(poly)
    assert list(Polynomial() + poly) == list(poly)


def test_add_is_commutative_for_distinct_exponents():
    first = Polynomial([(1, 5), (2, 1)])
    second = Polynomial([(3, 4), (4, 0)])
    assert list(first + second) == list(second + first)
    assert exponents(first + second) == [5, 4, 1, 0]


def test_add_does_not_modify_operands():
    first = Polynomial([(1, 1)])
    second = Polynomial([(2, 1)])
    _ = first + second
    assert list(first) == [Term(1.0, 1)]
    assert list(second) == [Term(2.0, 1)]
    assert len(first + second) == 1