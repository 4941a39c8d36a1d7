from drills.palindrome_products import palindrome_products


def test_smallest_from_single_digit_factors():
    smallest, _ = palindrome_products(1, 9)
    assert smallest.value == 1
    assert smallest.factors == {(1, 1)}


def test_largest_from_single_digit_factors():
    _, largest = palindrome_products(1, 9)
    assert largest.value == 9
    assert largest.factors == {(1, 9), (3, 3)}


def test_smallest_from_double_digit_factors():
    smallest, _ = palindrome_products(10, 99)
    assert smallest.value == 121
    assert smallest.factors == {(11, 11)}


def test_largest_from_double_digit_factors():
    _, largest = palindrome_products(10, 99)
    assert largest.value == 9009
    assert largest.factors == {(91, 99)}


def test_smallest_from_triple_digit_factors():
    smallest, _ = palindrome_products(100, 999)
    assert smallest.value == 10201
    assert smallest.factors == {(101, 101)}


def test_largest_from_triple_digit_factors():
    _, largest = palindrome_products(100, 999)
    assert largest.value == 906609
    assert largest.factors == {(913, 993)}


def test_smallest_from_four_digit_factors():
    smallest, _ = palindrome_products(1000, 9999)
    assert smallest.value == 1002001
    assert smallest.factors == {(1001, 1001)}


def test_largest_from_four_digit_factors():
    _, largest = palindrome_products(1000, 9999)
    assert largest.value == 99000099
    assert largest.factors == {(9901, 9999)}


def test_empty_result_for_smallest_if_no_palindrome_in_range():
    assert palindrome_products(1002, 1003) is None


def test_empty_result_for_largest_if_no_palindrome_in_range():
    assert palindrome_products(15, 15) is None


def test_none_for_smallest_if_min_is_more_than_max():
    assert palindrome_products(10000, 1) is None


def test_none_for_largest_if_min_is_more_than_max():
    assert palindrome_products(2, 1) is None


def test_smallest_product_does_not_use_the_smallest_factor():
    smallest, _ = palindrome_products(3215, 4000)
    assert smallest.value == 10988901
    assert smallest.factors == {(3297, 3333)}