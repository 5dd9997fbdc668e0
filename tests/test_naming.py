"""
Tests for camelCase to SCREAMING_SNAKE_CASE tag conversion.
"""

from pysauce import to_tag


def test_to_tag_camel_case():
    assert to_tag("addTodo") == "ADD_TODO"
    assert to_tag("fetchUserByIdFast") == "FETCH_USER_BY_ID_FAST"


def test_to_tag_single_word():
    assert to_tag("todo") == "TODO"
    assert to_tag("a") == "A"


def test_to_tag_leading_capital_not_prefixed():
    assert to_tag("A") == "A"
    assert to_tag("AddTodo") == "ADD_TODO"


def test_to_tag_consecutive_capitals_each_get_underscore():
    """Acronyms are split letter by letter."""
    assert to_tag("parseXMLNow") == "PARSE_X_M_L_NOW"


def test_to_tag_snake_case_is_just_upper_cased():
    assert to_tag("add_todo") == "ADD_TODO"
