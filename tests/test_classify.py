from coolkit.classify import DEFAULT_FILTERS, classify_array


def test_default_filters_label_position_and_kind():
    assert classify_array([1, "a", None]) == [
        ["odd", "first", "number"],
        ["even", "string"],
        ["odd", "last"],
    ]


def test_single_item_is_first_and_last():
    assert classify_array([4.5]) == [["odd", "first", "last", "number"]]


def test_booleans_are_not_numbers():
    assert "number" not in classify_array([True])[0]


def test_empty_input():
    assert classify_array([]) == []


def test_custom_filters_replace_defaults_in_given_order():
    filters = {
        "big": lambda item, index, length: item > 10,
        "middle": lambda item, index, length: 0 < index < length - 1,
    }
    assert classify_array([20, 5, 30, 1], filters) == [["big"], ["middle"], ["big", "middle"], []]


def test_default_filter_order():
    assert list(DEFAULT_FILTERS) == ["even", "odd", "first", "last", "number", "string"]
