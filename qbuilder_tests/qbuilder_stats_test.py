import math
import suite
from decimal import Decimal
from suite import assert_that, assert_raises
from dgen import from_schema
from qbuilder import Q, empty, QueryOptions

# --- test data ---
people_data = [
    {'id': 1, 'name': 'Alice', 'age': 30, 'department_id': 1},
    {'id': 2, 'name': 'Bob', 'age': 25, 'department_id': 2},
    {'id': 3, 'name': 'Charlie', 'age': 35, 'department_id': 1},
]

product_schema = {
    'id': {'_qen_provider': 'sequence'},
    'price': ('pyfloat', {'min_value': 5, 'max_value': 500, 'right_digits': 2}),
    'stock': ('pyint', {'min_value': 0, 'max_value': 50}),
}


# --- sum / avg ---

@suite.test("sum adds a numeric field")
def test_sum_basic():
    assert_that(Q(people_data).sum('age') == 90, "ages should sum to 90")


@suite.test("sum of an empty sequence is zero")
def test_sum_empty():
    assert_that(empty().sum('age') == 0, "empty sum should be 0")


@suite.test("sum coerces numeric strings and booleans")
def test_sum_coercion():
    data = [{'v': '1.5'}, {'v': 2}, {'v': True}, {'v': ' 3 '}, {'v': ''}]
    assert_that(Q(data).sum('v') == 7.5, "1.5 + 2 + 1 + 3 + 0")


@suite.test("non-numeric values turn the sum into nan by default")
def test_sum_nan_propagation():
    data = [{'v': 1}, {'v': 'abc'}, {'v': 2}]
    assert_that(math.isnan(Q(data).sum('v')), "nan should propagate")
    assert_that(math.isnan(Q(data).avg('v')), "avg inherits the nan")
    assert_that(math.isnan(Q([{'v': None}]).sum('v')), "None is not a number")


@suite.test("strict numbers raise on non-numeric values")
def test_sum_strict():
    query = Q([{'v': 1}, {'v': 'abc'}], QueryOptions(strict_numbers=True))
    error = assert_raises(TypeError, lambda: query.sum('v'))
    assert_that("'abc'" in str(error), "message should name the value")
    assert_that(Q([{'v': '4'}], QueryOptions(strict_numbers=True)).sum('v') == 4, "numeric strings still parse")


@suite.test("sum falls back to python arithmetic for decimals")
def test_sum_decimal():
    total = Q([{'v': Decimal('1.10')}, {'v': Decimal('2.20')}]).sum('v')
    assert_that(total == Decimal('3.30'), "decimal values should add exactly")


@suite.test("integer sums past the int64 range stay exact")
def test_sum_large_ints():
    total = Q([{'v': 2**62}, {'v': 2**62}]).sum('v')
    assert_that(total == 2**63, f"expected {2**63}, got {total}")
    assert_that(isinstance(total, int), "integer input should give an int")
    assert_that(Q([{'v': 2**64}, {'v': -1}]).sum('v') == 2**64 - 1, "values beyond int64 add exactly")


@suite.test("avg near the int64 limit does not wrap")
def test_avg_large_ints():
    average = Q([{'v': 2**63 - 1}, {'v': 1}]).avg('v')
    assert_that(average == float(2**62), f"expected {float(2**62)}, got {average}")


@suite.test("mixed int and float sums still use numpy floats")
def test_sum_mixed_int_float():
    assert_that(Q([{'v': 1}, {'v': 2.5}]).sum('v') == 3.5, "1 + 2.5")


@suite.test("prefixed integer strings parse and None counts as missing")
def test_sum_prefixed_strings():
    assert_that(Q([{'v': '0x10'}, {'v': '0b11'}, {'v': '010'}]).sum('v') == 29, "16 + 3 + 10")
    assert_that(math.isnan(Q([{'v': 1}, {'v': None}]).sum('v')), "None should not read as 0")


@suite.test("sum accepts a selector")
def test_sum_selector():
    assert_that(Q(people_data).sum(lambda p: p['age'] * 2) == 180, "selector values should add")


@suite.test("avg is sum divided by count")
def test_avg_basic():
    assert_that(Q(people_data).avg('age') == 30, "average age should be 30")
    products = from_schema(product_schema, seed=5).take(20)
    assert_that(math.isclose(products.avg('price'), products.sum('price') / products.count()),
                "avg should equal sum / count")


@suite.test("avg of an empty sequence is zero")
def test_avg_empty():
    assert_that(empty().avg('age') == 0, "empty avg should be 0")


# --- max / min ---

@suite.test("max and min return whole records")
def test_max_min_records():
    data = [{'age': 30}, {'age': 25}, {'age': 35}]
    assert_that(Q(data).max('age') == {'age': 35}, "max record")
    assert_that(Q(data).min('age') == {'age': 25}, "min record")
    assert_that(Q(people_data).max('age')['name'] == 'Charlie', "oldest is charlie")
    assert_that(Q(people_data).min('age')['name'] == 'Bob', "youngest is bob")


@suite.test("max and min of an empty sequence are None")
def test_max_min_empty():
    assert_that(empty().max('age') is None, "empty max")
    assert_that(empty().min('age') is None, "empty min")


@suite.test("max and min keep the first record on ties")
def test_max_min_ties():
    data = [{'id': 1, 'v': 5}, {'id': 2, 'v': 5}, {'id': 3, 'v': 1}, {'id': 4, 'v': 1}]
    assert_that(Q(data).max('v')['id'] == 1, "first maximum wins")
    assert_that(Q(data).min('v')['id'] == 3, "first minimum wins")


@suite.test("max and min agree with sorting")
def test_max_min_match_order_by():
    products = from_schema(product_schema, seed=9).take(30)
    assert_that(products.max('stock')['stock'] == products.order_by('stock', True).first()['stock'], "max")
    assert_that(products.min('price') == products.order_by('price').first(), "min")


if __name__ == "__main__":
    suite.run(title="qbuilder aggregate test suite")
