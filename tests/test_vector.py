import pytest

from ridgelinalg.vector import Vector


def make_v1():
    return Vector.from_values([1.0, 2.0, 3.0])


def test_new_vector_is_zero_filled():
    v = Vector(4)
    assert len(v) == 4
    assert v.to_list() == [0.0, 0.0, 0.0, 0.0]


def test_default_vector_is_empty():
    assert len(Vector()) == 0


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Vector(-1)


def test_set_and_get():
    v = Vector(3)
    v[0] = 1.0
    v[1] = 2.0
    v[2] = 3.0
    assert v == make_v1()
    assert v[2] == 3.0


@pytest.mark.parametrize("index", [3, 100, -1])
def test_index_out_of_range(index):
    v = make_v1()
    with pytest.raises(IndexError):
        v[index]
    with pytest.raises(IndexError):
        v[index] = 1.0
    assert v.to_list() == [1.0, 2.0, 3.0]
    assert len(v) == 3


def test_iteration_matches_values():
    assert list(make_v1()) == [1.0, 2.0, 3.0]


def test_sum_equals_double():
    v1 = make_v1()
    v2 = +v1
    assert v1 + v2 == v1 * 2.0


def test_copy_is_independent():
    v1 = make_v1()
    v2 = +v1
    v2[0] = 42.0
    assert v1[0] == 1.0


def test_subtraction_undoes_addition():
    v1 = make_v1()
    v4 = Vector.from_values([5.0, 4.0, 3.0])
    assert (v1 + v4) - v4 == v1


def test_negation():
    v1 = make_v1()
    assert (-v1).to_list() == [-1.0, -2.0, -3.0]
    assert v1 + (-v1) == Vector(3)


def test_scalar_multiplication_commutes():
    v1 = make_v1()
    assert 3.0 * v1 == v1 * 3.0


def test_dot_product():
    v1 = make_v1()
    assert v1 * v1 == 14.0


def test_dot_product_is_symmetric():
    a = Vector.from_values([1.5, -2.0, 0.5])
    b = Vector.from_values([4.0, 1.0, -3.0])
    assert a * b == b * a


def test_increment_and_decrement_round_trip():
    v = make_v1()
    returned = v.increment()
    assert v.to_list() == [2.0, 3.0, 4.0]
    assert returned == v
    v.decrement()
    assert v == make_v1()


def test_size_mismatch_raises():
    a = Vector.from_values([1.0, 2.0])
    b = Vector.from_values([3.0, 4.0, 5.0])
    with pytest.raises(ValueError):
        a + b
    with pytest.raises(ValueError):
        a - b
    with pytest.raises(ValueError):
        a * b
    assert a.to_list() == [1.0, 2.0]
    assert b.to_list() == [3.0, 4.0, 5.0]


def test_repr_round_trip_values():
    v = make_v1()
    assert repr(v) == "Vector.from_values([1.0, 2.0, 3.0])"