"""Unit tests for metadata accessors."""

from wpbridge.api import (
    MetaList,
    MetaMap,
    SingleMeta,
    add_user_meta,
    delete_user_meta,
    get_metadata,
    get_user_meta,
    update_user_meta,
)


class TestGetMetadata:
    """Tests for get_metadata / get_user_meta."""

    def test_single_flag_picks_variant(self, app):
        """Same stored data, single decides scalar vs. collection."""
        add_user_meta(app, 7, "color", "blue")
        add_user_meta(app, 7, "color", "green")

        single = get_user_meta(app, 7, "color", single=True)
        many = get_user_meta(app, 7, "color", single=False)

        assert single == SingleMeta("blue")
        assert many == MetaList(["blue", "green"])

    def test_forwards_arguments(self, app, runtime):
        """get_metadata forwards type, id, key and flag positionally."""
        get_metadata(app, "post", 3, "views", True)

        assert runtime.calls_to("get_metadata")[0].args == ("post", 3, "views", True)

    def test_user_meta_uses_user_type(self, app, runtime):
        """get_user_meta is get_metadata with meta type 'user'."""
        get_user_meta(app, 9, "nickname")

        assert runtime.calls_to("get_metadata")[0].args == ("user", 9, "nickname", False)

    def test_missing_key(self, app):
        """Missing data is an empty result, not an error."""
        assert get_user_meta(app, 7, "nope", single=True) == SingleMeta("")
        assert get_user_meta(app, 7, "nope") == MetaList([])

    def test_false_result_is_empty_list(self, app, runtime):
        """An invalid object id (false) gives an empty MetaList."""
        runtime.set_result("get_metadata", False)

        assert get_metadata(app, "user", 0, "x") == MetaList([])

    def test_single_keeps_array_value(self, app, runtime):
        """single=True never reshapes the value, even when it is a list."""
        runtime.set_result("get_metadata", ["a", "b"])

        assert get_metadata(app, "user", 1, "x", single=True) == SingleMeta(["a", "b"])

    def test_dict_result_flattened(self, app, runtime):
        """A keyed PHP array becomes a list of its values."""
        runtime.set_result("get_metadata", {0: "a", 1: "b"})

        assert get_metadata(app, "user", 1, "x") == MetaList(["a", "b"])


class TestUserMetaWrites:
    """Tests for add/update/delete_user_meta."""

    def test_add_returns_true_for_meta_id(self, app, runtime):
        """An integer meta id means success."""
        assert add_user_meta(app, 1, "k", "v") is True
        assert runtime.calls_to("add_user_meta")[0].args == (1, "k", "v", False)

    def test_add_unique_rejected(self, app):
        """unique=True fails when the key already exists."""
        add_user_meta(app, 1, "k", "v")
        assert add_user_meta(app, 1, "k", "w", unique=True) is False

    def test_add_bool_true_is_not_meta_id(self, app, runtime):
        """A bare True is not an integer meta id."""
        runtime.set_result("add_user_meta", True)
        assert add_user_meta(app, 1, "k", "v") is False

    def test_update_and_delete(self, app):
        """update replaces values and delete removes them."""
        assert update_user_meta(app, 2, "k", "v1") is True
        assert update_user_meta(app, 2, "k", "v2") is True
        assert get_user_meta(app, 2, "k", single=True) == SingleMeta("v2")
        assert update_user_meta(app, 2, "k", "v2") is False

        assert delete_user_meta(app, 2, "k") is True
        assert get_user_meta(app, 2, "k") == MetaList([])
        assert delete_user_meta(app, 2, "k") is False

    def test_delete_matching_value_only(self, app):
        """delete with a value removes only matching entries."""
        add_user_meta(app, 3, "tag", "a")
        add_user_meta(app, 3, "tag", "b")

        assert delete_user_meta(app, 3, "tag", "a") is True
        assert get_user_meta(app, 3, "tag") == MetaList(["b"])


class TestAllKeys:
    """Tests for reading every meta key of an object."""

    def test_empty_key_keeps_keys(self, app):
        """An empty meta_key returns a MetaMap keyed by meta key."""
        add_user_meta(app, 7, "color", "blue")
        add_user_meta(app, 7, "nickname", "ada")

        result = get_metadata(app, "user", 7, "")

        assert result == MetaMap({"color": ["blue"], "nickname": ["ada"]})

    def test_empty_key_ignores_single(self, app):
        """single does not change the shape of an all-keys read."""
        add_user_meta(app, 7, "color", "blue")

        assert get_user_meta(app, 7, "", single=True) == MetaMap({"color": ["blue"]})

    def test_empty_key_invalid_object(self, app, runtime):
        """A false result for an all-keys read is an empty MetaMap."""
        assert get_metadata(app, "user", 0, "") == MetaMap({})

    def test_keyed_value_not_flattened(self, app, runtime):
        """An associative array under one key stays a single value."""
        runtime.set_result("get_metadata", {"street": "Main", "zip": "1000"})

        assert get_metadata(app, "user", 1, "address") == MetaList([{"street": "Main", "zip": "1000"}])
