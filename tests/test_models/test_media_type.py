"""Tests for MediaType model."""

from dataclasses import FrozenInstanceError

import pytest

from mediatypes.models import MediaType, Parameter
from mediatypes.utils.validation import InvalidMediaTypeError


class TestFromMime:
    """Test parsing raw media type strings."""

    def test_parameters(self):
        """Test type, subtype and parameters of a multi-parameter string."""
        media_type = MediaType.from_mime("text/plain; charset=iso-2022-jp; format=flowed; delsp=yes")

        assert isinstance(media_type, MediaType)
        assert media_type.get_type() == "text"
        assert media_type.get_subtype() == "plain"
        assert media_type.get_parameter("charset").value == "iso-2022-jp"
        assert media_type.get_parameter("format").value == "flowed"
        assert media_type.get_parameter("delsp").value == "yes"

    def test_parameter_order_preserved(self):
        """Test that parameters keep their order of appearance."""
        media_type = MediaType.from_mime("text/plain; b=2; a=1; c=3")
        assert list(media_type.get_parameters()) == ["b", "a", "c"]

    def test_empty_subtype(self):
        """Test that 'text//' is rejected."""
        with pytest.raises(InvalidMediaTypeError):
            MediaType.from_mime("text//")

    def test_missing_subtype(self):
        """Test that a type without slash is rejected."""
        with pytest.raises(InvalidMediaTypeError, match="no subtype"):
            MediaType.from_mime("text")

    def test_nothing_after_slash(self):
        """Test that 'text/' is rejected."""
        with pytest.raises(InvalidMediaTypeError, match="no subtype"):
            MediaType.from_mime("text/")

    def test_empty_string(self):
        """Test that an empty string is an argument error, not a media type error."""
        with pytest.raises(ValueError) as exc_info:
            MediaType.from_mime("")
        assert not isinstance(exc_info.value, InvalidMediaTypeError)

    def test_blank_type(self):
        """Test that a blank type is rejected."""
        with pytest.raises(InvalidMediaTypeError, match="no type"):
            MediaType.from_mime("  /plain")

    def test_unknown_type(self):
        """Test that a type outside the whitelist is rejected."""
        with pytest.raises(InvalidMediaTypeError, match=r"Type is not valid \(sound\)"):
            MediaType.from_mime("sound/wav")

    def test_invalid_subtype(self):
        """Test that a subtype failing the syntax pattern is rejected."""
        with pytest.raises(InvalidMediaTypeError, match="Sub type is not valid"):
            MediaType.from_mime("text/pl ain")

    def test_type_and_subtype_normalized(self):
        """Test that type and subtype are trimmed and lowercased."""
        media_type = MediaType.from_mime("  TEXT / HTML ; charset=UTF-8")
        assert media_type.type == "text"
        assert media_type.subtype == "html"
        # Parameter values are left as written
        assert media_type.get_parameter("charset").value == "UTF-8"

    def test_quoted_parameter(self):
        """Test that one layer of double quotes is stripped."""
        media_type = MediaType.from_mime('text/plain; charset="iso-2022-jp"')
        assert media_type.get_parameter("charset").value == "iso-2022-jp"

    def test_parameter_without_value(self):
        """Test that a bare parameter name has a None value."""
        media_type = MediaType.from_mime("text/plain; delsp; format=")
        assert media_type.get_parameter("delsp").value is None
        assert media_type.get_parameter("format").value is None

    def test_trailing_semicolon(self):
        """Test that empty parameter pieces are skipped."""
        media_type = MediaType.from_mime("text/plain; charset=utf-8;")
        assert list(media_type.get_parameters()) == ["charset"]

    def test_duplicate_parameter(self):
        """Test that a repeated parameter name is a media type error."""
        with pytest.raises(InvalidMediaTypeError, match="Duplicate parameter name"):
            MediaType.from_mime("text/plain; a=1; a=2")

    def test_invalid_suffix(self):
        """Test that an unknown suffix is a media type error."""
        with pytest.raises(InvalidMediaTypeError, match=r"Suffix is not valid \(yaml\)"):
            MediaType.from_mime("application/sample+yaml")

    def test_invalid_tree(self):
        """Test that an unknown tree is a media type error."""
        with pytest.raises(InvalidMediaTypeError, match=r"Tree is not valid \(foo\)"):
            MediaType.from_mime("application/foo.bar")

    def test_invalid_tree_chains_argument_error(self):
        """Test that construction errors are chained to the media type error."""
        with pytest.raises(InvalidMediaTypeError) as exc_info:
            MediaType.from_mime("application/foo.bar")
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_suffix(self):
        """Test suffix detection."""
        media_type = MediaType.from_mime("application/calendar+json; charset=utf-8")

        assert media_type.get_type() == "application"
        assert media_type.get_subtype() == "calendar+json"
        assert media_type.get_suffix() == "json"
        assert media_type.get_tree() is None
        assert media_type.get_parameter("charset").value == "utf-8"

    def test_tree(self):
        """Test tree detection."""
        media_type = MediaType.from_mime("application/vnd.adobe.flash-movie")

        assert media_type.get_type() == "application"
        assert media_type.get_subtype() == "vnd.adobe.flash-movie"
        assert media_type.get_tree() == "vnd"
        assert media_type.get_suffix() is None

    def test_tree_and_suffix(self):
        """Test that tree and suffix are both taken from the full subtype."""
        media_type = MediaType.from_mime("application/vnd.api+json")
        assert media_type.tree == "vnd"
        assert media_type.suffix == "json"
        assert media_type.subtype == "vnd.api+json"

    def test_suffix_split_on_first_plus(self):
        """Test that everything after the first '+' is the suffix candidate."""
        with pytest.raises(InvalidMediaTypeError, match=r"Suffix is not valid \(xml\+json\)"):
            MediaType.from_mime("application/a+xml+json")


class TestDirectConstruction:
    """Test building a MediaType from components."""

    def test_basic(self):
        """Test construction without parameters."""
        media_type = MediaType("text", "plain")
        assert media_type.type == "text"
        assert media_type.subtype == "plain"
        assert media_type.parameters == ()
        assert media_type.tree is None
        assert media_type.suffix is None

    def test_invalid_type(self):
        """Test that an unknown type is an argument error."""
        with pytest.raises(ValueError, match=r"Type is not valid \(sound\)") as exc_info:
            MediaType("sound", "wav")
        assert not isinstance(exc_info.value, InvalidMediaTypeError)

    def test_type_is_case_sensitive(self):
        """Test that components are not lowercased on direct construction."""
        with pytest.raises(ValueError, match="Type is not valid"):
            MediaType("Text", "plain")

    def test_invalid_subtype(self):
        """Test that a subtype failing the pattern is rejected."""
        with pytest.raises(ValueError, match="Sub type is not valid"):
            MediaType("text", "error/")

    def test_invalid_suffix(self):
        """Test that an unknown suffix is rejected."""
        with pytest.raises(ValueError, match="Suffix is not valid"):
            MediaType("application", "sample+txt")

    def test_suffix_lowercased(self):
        """Test that the derived suffix is lowercased."""
        assert MediaType("application", "sample+XML").suffix == "xml"

    def test_invalid_tree(self):
        """Test that an unknown tree is rejected."""
        with pytest.raises(ValueError, match="Tree is not valid"):
            MediaType("application", "abc.def")

    def test_duplicate_parameter(self):
        """Test that a repeated parameter name is rejected."""
        with pytest.raises(ValueError, match=r"Duplicate parameter name \(a\)"):
            MediaType("text", "plain", (Parameter("a", "1"), Parameter("a", "2")))

    def test_parameter_names_case_sensitive(self):
        """Test that names differing only in case are distinct."""
        media_type = MediaType("text", "plain", (Parameter("a", "1"), Parameter("A", "2")))
        assert media_type.get_parameter("a").value == "1"
        assert media_type.get_parameter("A").value == "2"

    def test_list_of_parameters_stored_as_tuple(self):
        """Test that any iterable of parameters is accepted."""
        media_type = MediaType("text", "plain", [Parameter("charset", "utf-8")])  # type: ignore[arg-type]
        assert media_type.parameters == (Parameter("charset", "utf-8"),)
        hash(media_type)

    def test_create_from_mapping(self):
        """Test that create adapts a plain mapping into parameters."""
        media_type = MediaType.create("text", "plain", {"charset": "utf-8", "format": None})
        assert media_type.get_parameter("charset") == Parameter("charset", "utf-8")
        assert media_type.get_parameter("format").value is None

    def test_create_from_parameters(self):
        """Test that create accepts Parameter objects."""
        media_type = MediaType.create("text", "plain", [Parameter("a", "1")])
        assert str(media_type) == "text/plain; a=1"

    def test_create_without_parameters(self):
        """Test that create works without parameters."""
        assert MediaType.create("image", "png") == MediaType("image", "png")

    def test_immutable(self):
        """Test that fields cannot be reassigned."""
        media_type = MediaType("text", "plain")
        with pytest.raises(FrozenInstanceError):
            media_type.subtype = "html"  # type: ignore[misc]


class TestQueries:
    """Test classification predicates and accessors."""

    def test_is_unregistered(self):
        """Test the 'x.' tree against the 'x-' prefix."""
        assert MediaType.from_mime("application/x.sample+xml").is_unregistered() is True
        assert MediaType.from_mime("application/x-sample+xml").is_unregistered() is False

    def test_is_unregistered_general_rule(self):
        """Test that any subtype in the 'x' tree is unregistered."""
        assert MediaType("application", "x.foo").is_unregistered() is True

    def test_form_urlencoded_is_registered(self):
        """Test the application/x-www-form-urlencoded exception."""
        media_type = MediaType("application", "x-www-form-urlencoded")
        assert media_type.is_unregistered() is False
        assert media_type.is_experimental() is True

    def test_is_experimental(self):
        """Test the 'x-' subtype prefix."""
        assert MediaType.from_mime("application/x-tex").is_experimental() is True
        assert MediaType.from_mime("application/x.tex").is_experimental() is False
        assert MediaType.from_mime("application/pdf").is_experimental() is False

    def test_is_vendor(self):
        """Test the 'vnd' tree."""
        assert MediaType.from_mime("application/vnd.ms-excel").is_vendor() is True
        assert MediaType.from_mime("application/prs.hoge+xml").is_vendor() is False
        assert MediaType.from_mime("application/json").is_vendor() is False

    def test_get_parameter_missing(self):
        """Test that an absent parameter is None."""
        assert MediaType.from_mime("text/plain").get_parameter("charset") is None

    def test_get_parameter_exact_name(self):
        """Test that parameter lookup does not fold case."""
        media_type = MediaType.from_mime("text/plain; Charset=utf-8")
        assert media_type.get_parameter("charset") is None
        assert media_type.get_parameter("Charset").value == "utf-8"

    def test_get_parameters_is_a_copy(self):
        """Test that the parameter mapping cannot change the value."""
        media_type = MediaType.from_mime("text/plain; charset=utf-8")
        parameters = media_type.get_parameters()
        parameters.clear()
        assert media_type.get_parameter("charset") is not None


class TestValidators:
    """Test the static validators exposed on MediaType."""

    def test_is_valid_type(self):
        """Test type whitelist."""
        assert MediaType.is_valid_type("text") is True
        assert MediaType.is_valid_type("image") is True
        assert MediaType.is_valid_type("sound") is False

    def test_is_valid_subtype(self):
        """Test subtype pattern."""
        assert MediaType.is_valid_subtype("json") is True
        assert MediaType.is_valid_subtype("xml") is True
        assert MediaType.is_valid_subtype("error/") is False

    def test_is_valid_suffix(self):
        """Test suffix whitelist."""
        assert MediaType.is_valid_suffix("xml") is True
        assert MediaType.is_valid_suffix("txt") is False

    def test_is_valid_tree(self):
        """Test tree whitelist."""
        assert MediaType.is_valid_tree("prs") is True
        assert MediaType.is_valid_tree("vendor") is False


class TestRendering:
    """Test string rendering."""

    def test_without_parameters(self):
        """Test rendering of type and subtype only."""
        assert str(MediaType.from_mime("image/png")) == "image/png"

    def test_with_parameters(self):
        """Test that parameters are joined with '; '."""
        media_type = MediaType.from_mime('text/plain;charset="utf-8";format=flowed')
        assert str(media_type) == "text/plain; charset=utf-8; format=flowed"

    def test_missing_value(self):
        """Test that a None value renders as empty."""
        assert str(MediaType.from_mime("text/plain; delsp")) == "text/plain; delsp="

    @pytest.mark.parametrize(
        "mime",
        [
            "text/plain; charset=iso-2022-jp; format=flowed; delsp=yes",
            "application/calendar+json; charset=utf-8",
            "application/vnd.adobe.flash-movie",
            "application/x.sample+xml",
            'multipart/form-data; boundary="----abc123"',
            "text/plain; delsp",
        ],
    )
    def test_reparse_is_stable(self, mime):
        """Test that parsing the rendering gives back an equal value."""
        media_type = MediaType.from_mime(mime)
        reparsed = MediaType.from_mime(str(media_type))

        assert reparsed == media_type
        assert str(reparsed) == str(media_type)

    def test_direct_construction_reparse(self):
        """Test that a directly built value survives a round trip."""
        media_type = MediaType.create("application", "vnd.api+json", {"charset": "utf-8", "ext": "bulk"})
        assert MediaType.from_mime(str(media_type)) == media_type
