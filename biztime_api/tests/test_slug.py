"""Company code derivation from names."""
from biztime.utils.slug import slugify


def test_slugify_lowercases() -> None:
    assert slugify("NewCo") == "newco"


def test_slugify_strips_punctuation_and_joins_words() -> None:
    assert slugify("Acme Widgets, Inc.") == "acme-widgets-inc"
    assert slugify("  Black & Decker  ") == "black-decker"
    assert slugify("foo__bar--baz") == "foo-bar-baz"


def test_slugify_folds_accents() -> None:
    assert slugify("Café Crème") == "cafe-creme"


def test_slugify_nothing_left() -> None:
    assert slugify("!!!") == ""


def test_slugify_is_deterministic() -> None:
    assert slugify("Apple Computer") == slugify("Apple Computer") == "apple-computer"
