"""Tests for the link address builder."""

from docnav.core.urls import encode_component, get_url


class TestEncodeComponent:
    """Tests for encode_component()."""

    def test__reserved_characters__encoded(self) -> None:
        assert encode_component("a/b c?d") == "a%2Fb%20c%3Fd"

    def test__unreserved_marks__kept(self) -> None:
        assert encode_component("it's (ok)!~*") == "it's%20(ok)!~*"


class TestGetUrl:
    """Tests for get_url()."""

    def test__anchor__links_to_slug(self) -> None:
        assert get_url("Button", "button", anchor=True) == "/#button"

    def test__anchor__uses_pathname(self) -> None:
        url = get_url("Button", "button", anchor=True, pathname="/docs/")

        assert url == "/docs/#button"

    def test__anchor_without_slug__returns_none(self) -> None:
        assert get_url("Button", anchor=True) is None

    def test__hash_path__appends_name(self) -> None:
        url = get_url("Button", "button", hash_path=["Components"])

        assert url == "/#/Components/Button"

    def test__empty_hash_path__links_name_only(self) -> None:
        assert get_url("Components", hash_path=[]) == "/#/Components"

    def test__hash_path_with_id__ends_with_slug(self) -> None:
        url = get_url("Button", "button", hash_path=["Components"], id=True)

        assert url == "/#/Components?id=button"

    def test__hash_path__encodes_segments(self) -> None:
        url = get_url("Text Input", hash_path=["Form Controls"])

        assert url == "/#/Form%20Controls/Text%20Input"

    def test__hash_path_without_name__returns_none(self) -> None:
        assert get_url(None, "button", hash_path=["Components"]) is None

    def test__hash_path_id_without_slug__returns_none(self) -> None:
        assert get_url("Button", hash_path=["Components"], id=True) is None

    def test__isolated__links_to_isolated_view(self) -> None:
        assert get_url("Button", isolated=True) == "/#!/Button"

    def test__nochrome__adds_query_and_isolated_hash(self) -> None:
        assert get_url("Button", nochrome=True) == "/?nochrome#!/Button"

    def test__example__appends_index(self) -> None:
        assert get_url("Button", isolated=True, example=0) == "/#!/Button/0"

    def test__absolute__prefixes_origin(self) -> None:
        url = get_url(
            "Button",
            "button",
            anchor=True,
            absolute=True,
            origin="http://localhost:6060",
        )

        assert url == "http://localhost:6060/#button"

    def test__takes_hash__keeps_current_hash_without_query(self) -> None:
        url = get_url(
            "Button",
            takes_hash=True,
            hash="#/Components?id=button",
        )

        assert url == "/#/Components"

    def test__no_mode__returns_pathname(self) -> None:
        assert get_url("Button", "button", pathname="/docs/") == "/docs/"
