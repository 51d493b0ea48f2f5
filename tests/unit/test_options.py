"""Unit tests for options and site information."""

from wpbridge.api import get_admin_email, get_option, get_site_url, get_version, update_option
from wpbridge.runtime import WpApp
from wpbridge.testing import RecordingRuntime


class TestOptions:
    """Tests for get_option / update_option."""

    def test_get_option_default_when_unset(self, app, runtime):
        """Unset options return the supplied default."""
        assert get_option(app, "blogname", "fallback") == "fallback"
        assert runtime.calls_to("get_option")[0].args == ("blogname", "fallback")

    def test_get_option_default_is_none(self, app, runtime):
        """The default default is None (PHP null)."""
        assert get_option(app, "missing") is None
        assert runtime.calls_to("get_option")[0].args == ("missing", None)

    def test_update_then_get(self, app):
        """A written option is read back unchanged."""
        assert update_option(app, "posts_per_page", 25) is True
        assert get_option(app, "posts_per_page") == 25

    def test_update_unchanged_returns_false(self, app):
        """Writing the same value again reports no change."""
        update_option(app, "blogname", "Site")
        assert update_option(app, "blogname", "Site") is False

    def test_update_coerces_to_bool(self, app, runtime):
        """Truthy runtime answers become True."""
        runtime.set_result("update_option", 1)
        assert update_option(app, "x", "y") is True


class TestAdminEmail:
    """Tests for get_admin_email."""

    def test_returns_written_value(self, app):
        """The admin email written through update_option comes back."""
        update_option(app, "admin_email", "admin@example.org")
        assert get_admin_email(app) == "admin@example.org"

    def test_unset_is_none(self, app):
        """No admin_email option gives None."""
        assert get_admin_email(app) is None

    def test_non_string_is_none(self, app, runtime):
        """A non-string value gives None."""
        runtime.set_result("get_option", False)
        assert get_admin_email(app) is None


class TestSiteInfo:
    """Tests for get_version and get_site_url."""

    def test_version_from_global(self):
        """get_version reads the wp_version global."""
        app = WpApp(RecordingRuntime(wp_version="6.5"))
        assert get_version(app) == "6.5"

    def test_site_url_defaults(self, app, runtime):
        """get_site_url passes '' and None when omitted."""
        assert get_site_url(app) == "http://example.org"
        assert runtime.calls_to("site_url")[0].args == ("", None)

    def test_site_url_path_and_scheme(self, app):
        """path and scheme are forwarded."""
        assert get_site_url(app, "wp-admin/", "https") == "https://example.org/wp-admin/"

    def test_null_site_url_is_empty(self, app, runtime):
        """A null site_url result becomes '' like PHP string conversion."""
        runtime.set_result("site_url", None)

        assert get_site_url(app) == ""

    def test_missing_version_global_is_empty(self):
        """A missing wp_version global becomes ''."""
        runtime = RecordingRuntime()
        del runtime.globals["wp_version"]

        assert get_version(WpApp(runtime)) == ""
