"""Tests for userparam.validator.typedefs.user module."""

import pytest

from userparam.identity import UserIdentity
from userparam.messages import MessageFormatter
from userparam.validator import ParamSettingsModel, UserSubtype, ValidationException


def _settings(user_def, **kwargs) -> ParamSettingsModel:
    return user_def.normalize_settings(ParamSettingsModel(type="user", **kwargs))


class TestClassification:
    """Test how raw values are classified into user subtypes."""

    def test_user_id(self, user_def):
        """Test that #<digits> is looked up by account id."""
        result = user_def.classify("#42")
        assert result.subtype == UserSubtype.ID
        assert result.user == UserIdentity(id=42, name="Wiki sysop")

    def test_user_id_unknown_account(self, user_def):
        """Test that the id rule forwards whatever the store returns."""
        result = user_def.classify("#999")
        assert result.tag == "id"
        assert result.user is None

    def test_user_id_must_be_anchored(self, user_def):
        """Test that extra characters around the id are not an id reference."""
        for value in ["#12a", "a#12", "#", "#-1"]:
            result = user_def.classify(value)
            assert result.tag == "", value
            assert result.user is None

    def test_interwiki(self, user_def):
        """Test that imported names keep the raw value as the name."""
        result = user_def.classify("enwiki>some_body")
        assert result.subtype == UserSubtype.INTERWIKI
        assert result.user == UserIdentity(id=0, name="enwiki>some_body")

    def test_interwiki_without_canonical_form(self, user_def):
        """Test that an interwiki name with '#' is tagged but unresolved."""
        result = user_def.classify("enwiki>Some#body")
        assert result.tag == "interwiki"
        assert result.user is None

    def test_registered_name(self, user_def):
        """Test that registered names resolve to the account."""
        for value in ["Example", "example", "User:Example", "user:example"]:
            result = user_def.classify(value)
            assert result.subtype == UserSubtype.NAME, value
            assert result.user == UserIdentity(id=1, name="Example")

    def test_name_is_canonicalized(self, user_def):
        """Test underscores and case of the first letter."""
        result = user_def.classify("another_user")
        assert result.tag == "name"
        assert result.user == UserIdentity(id=2, name="Another user")

    def test_unregistered_name(self, user_def):
        """Test that valid but unregistered names are names with id 0."""
        result = user_def.classify("Nobody here")
        assert result.tag == "name"
        assert result.user == UserIdentity(id=0, name="Nobody here")
        assert not result.user.is_registered

    def test_reserved_name(self, user_def):
        """Test that reserved names still classify as names."""
        result = user_def.classify("Maintenance script")
        assert result.tag == "name"
        assert result.user == UserIdentity(id=0, name="Maintenance script")

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("192.0.2.7", "192.0.2.7"),
            ("User:192.0.2.7", "192.0.2.7"),
            ("192.000.002.007", "192.0.2.7"),
            ("::1", "0:0:0:0:0:0:0:1"),
            ("2001:db8::ff", "2001:DB8:0:0:0:0:0:FF"),
            ("User:2001:db8::ff", "2001:DB8:0:0:0:0:0:FF"),
            ("192.0.2.xxx", "192.0.2.xxx"),
        ],
    )
    def test_ip(self, user_def, value, expected):
        """Test IP addresses, including the masked form."""
        result = user_def.classify(value)
        assert result.subtype == UserSubtype.IP
        assert result.user == UserIdentity(id=0, name=expected)

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("192.0.2.0/24", "192.0.2.0/24"),
            ("User:192.0.2.0/24", "192.0.2.0/24"),
            ("010.0.0.0/8", "10.0.0.0/8"),
            ("2001:db8::/32", "2001:DB8:0:0:0:0:0:0/32"),
        ],
    )
    def test_cidr(self, user_def, value, expected):
        """Test IP ranges."""
        result = user_def.classify(value)
        assert result.subtype == UserSubtype.CIDR
        assert result.user == UserIdentity(id=0, name=expected)

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "300.300.300.300",
            "192.0.2.0/33",
            "Talk:Example",
            "meta:192.0.2.7",
            "Foo[bar]",
            "User:",
        ],
    )
    def test_no_match(self, user_def, value):
        """Test values that are not any kind of user."""
        result = user_def.classify(value)
        assert result.subtype is None
        assert result.tag == ""
        assert result.user is None

    @pytest.mark.parametrize("value", ["192.0.2.7#frag", "Example#top", "User:::1#x"])
    def test_fragment_always_fails(self, user_def, value):
        """Test that '#' fails the fallback even when the rest looks like an IP."""
        result = user_def.classify(value)
        assert result.tag == ""
        assert result.user is None

    def test_rules_run_in_priority_order(self, user_def):
        """Test that the first matching rule wins and later rules are skipped."""
        calls = []

        def first(value):
            calls.append("first")
            return None

        def second(value):
            calls.append("second")
            return user_def._classify_name(value)

        def third(value):
            calls.append("third")
            raise AssertionError("should not run")

        user_def.rules = (first, second, third)
        assert user_def.classify("Example").tag == "name"
        assert calls == ["first", "second"]

    def test_name_checked_before_address_fallback(self, user_def, identity_store):
        """Test that a valid name never reaches the title-based fallback."""
        looked_up = []
        real_lookup = identity_store.lookup_by_valid_name

        def tracking_lookup(name):
            looked_up.append(name)
            return real_lookup(name)

        identity_store.lookup_by_valid_name = tracking_lookup
        assert user_def.classify("192.0.2.7").tag == "ip"
        assert user_def.classify("Example").tag == "name"
        assert looked_up == ["192.0.2.7", "Example"]


class TestNormalizeSettings:
    """Test normalization of the user type settings."""

    def test_default_subtypes(self, user_def):
        settings = _settings(user_def)
        assert settings.allowed_user_types == ["name", "ip", "cidr", "interwiki"]
        assert settings.return_object is False

    def test_intersection_keeps_canonical_order(self, user_def):
        settings = _settings(user_def, allowed_user_types=["id", "bogus", "name"])
        assert settings.allowed_user_types == ["name", "id"]

    def test_duplicates_removed(self, user_def):
        settings = _settings(user_def, allowed_user_types=["cidr", "ip", "cidr"])
        assert settings.allowed_user_types == ["ip", "cidr"]

    def test_only_invalid_falls_back_to_default(self, user_def):
        for allowed in [[], ["bogus"], ["Name", "IP"]]:
            settings = _settings(user_def, allowed_user_types=allowed)
            assert settings.allowed_user_types == ["name", "ip", "cidr", "interwiki"]

    def test_normalization_is_idempotent(self, user_def):
        settings = _settings(user_def, allowed_user_types=["id", "interwiki"])
        assert user_def.normalize_settings(settings) == settings

    def test_aliases(self, user_def):
        """Test that schema-style keys are accepted."""
        settings = user_def.normalize_settings(
            ParamSettingsModel.model_validate(
                {"type": "user", "allowedUserTypes": ["ip"], "returnObject": True}
            )
        )
        assert settings.allowed_user_types == ["ip"]
        assert settings.return_object is True


class TestValidate:
    """Test UserDef.validate."""

    def test_returns_name_by_default(self, user_def):
        settings = _settings(user_def)
        assert user_def.validate("target", "example", settings, {}) == "Example"
        assert user_def.validate("target", "192.000.002.007", settings, {}) == "192.0.2.7"
        assert user_def.validate("target", "192.0.2.0/24", settings, {}) == "192.0.2.0/24"
        assert user_def.validate("target", "enwiki>Foo", settings, {}) == "enwiki>Foo"

    def test_returns_object(self, user_def):
        settings = _settings(user_def, return_object=True)
        assert user_def.validate("target", "Example", settings, {}) == UserIdentity(
            id=1, name="Example"
        )
        assert user_def.validate("target", "::1", settings, {}) == UserIdentity(
            id=0, name="0:0:0:0:0:0:0:1"
        )

    def test_disallowed_subtype(self, user_def):
        """Test that a valid IP fails when only names are allowed."""
        settings = _settings(user_def, allowed_user_types=["name"])
        with pytest.raises(ValidationException) as exc_info:
            user_def.validate("target", "192.0.2.7", settings, {})

        e = exc_info.value
        assert e.code == "baduser"
        assert e.data is None
        assert e.param_name == "target"
        assert e.param_value == "192.0.2.7"
        assert str(e) == 'Invalid value "192.0.2.7" for user parameter "target".'

    def test_id_not_allowed_by_default(self, user_def):
        settings = _settings(user_def)
        with pytest.raises(ValidationException, match="Invalid value"):
            user_def.validate("target", "#42", settings, {})

    def test_id_allowed(self, user_def):
        settings = _settings(user_def, allowed_user_types=["id"])
        assert user_def.validate("target", "#42", settings, {}) == "Wiki sysop"
        with pytest.raises(ValidationException):
            user_def.validate("target", "Wiki sysop", settings, {})

    def test_unknown_id(self, user_def):
        settings = _settings(user_def, allowed_user_types=["id"])
        with pytest.raises(ValidationException) as exc_info:
            user_def.validate("target", "#999", settings, {})
        assert exc_info.value.code == "baduser"

    def test_unresolved_interwiki(self, user_def):
        settings = _settings(user_def, allowed_user_types=["interwiki"])
        with pytest.raises(ValidationException):
            user_def.validate("target", "enwiki>Foo#bar", settings, {})

    def test_unclassifiable(self, user_def):
        settings = _settings(user_def)
        for value in ["", "300.300.300.300", "Talk:Example", "a|b"]:
            with pytest.raises(ValidationException):
                user_def.validate("target", value, settings, {})


class TestParamAndHelpInfo:
    """Test parameter info and help generation."""

    def test_param_info_lists_subtypes(self, user_def):
        settings = _settings(user_def, allowed_user_types=["id", "name"])
        assert user_def.get_param_info("target", settings, {}) == {"subtypes": ["name", "id"]}

    def test_help_message_structure(self, user_def):
        settings = _settings(user_def, allowed_user_types=["name", "ip"])
        msg = user_def.get_help_info("target", settings, {})["type"]

        assert msg.key == "paramvalidator-help-type-user"
        kinds = [p.kind for p in msg.params_list]
        assert kinds == ["text", "list", "num"]
        assert msg.params_list[0].value == 1
        assert [m.key for m in msg.params_list[1].value] == [
            "paramvalidator-help-type-user-subtype-name",
            "paramvalidator-help-type-user-subtype-ip",
        ]
        assert msg.params_list[2].value == 2

    def test_help_text_single(self, user_def):
        settings = _settings(user_def)
        text = MessageFormatter().format(user_def.get_help_info("target", settings, {})["type"])
        assert text == (
            "Type: user, by any of user name, IP, IP range and "
            'interwiki name (e.g. "prefix>ExampleName")'
        )

    def test_help_text_multi_single_subtype(self, user_def):
        settings = _settings(user_def, allowed_user_types=["id"], ismulti=True)
        msg = user_def.get_help_info("users", settings, {})["type"]
        assert msg.params_list[0].value == 2
        assert MessageFormatter().format(msg) == 'Type: list of users, by user ID (e.g. "#12345")'
