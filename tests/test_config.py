"""
Tests for conversion Options.

These tests verify:
    - Defaults and the derived min_scale_factor
    - Partial reconfiguration (omitted fields keep their value)
    - Fail-fast validation
    - Loading options from YAML/JSON files
"""

import json

import pytest

from riconv.config import (
    ConfigurationError,
    Options,
    load_options,
    normalize_option_keys,
    options_from_dict,
    options_to_dict,
)


class TestDefaults:
    """Test default option values."""

    def test_default_values(self):
        """Defaults match the documented conversion setup."""
        opts = Options()
        assert opts.base_size == 24
        assert opts.ri_unit == "rem"
        assert opts.unit == "px"
        assert opts.absolute_unit == "apx"
        assert opts.min_unit_size == 1
        assert opts.min_size == 16
        assert opts.precision == 5

    def test_min_scale_factor_derived(self):
        """min_scale_factor is min_size / base_size."""
        assert Options().min_scale_factor == pytest.approx(16 / 24)

    def test_options_immutable(self):
        """Options should be immutable."""
        opts = Options()
        with pytest.raises(AttributeError):
            opts.base_size = 16


class TestConfigure:
    """Test partial reconfiguration."""

    def test_configure_returns_new_object(self):
        """Reconfiguring leaves the original untouched."""
        opts = Options()
        updated = opts.configure(base_size=16)
        assert updated.base_size == 16
        assert opts.base_size == 24

    def test_omitted_fields_keep_value(self):
        """Only supplied fields change."""
        opts = Options(precision=2).configure(ri_unit="em")
        assert opts.precision == 2
        assert opts.ri_unit == "em"
        assert opts.unit == "px"

    def test_scale_factor_recomputed(self):
        """Changing base_size or min_size re-derives the scale factor."""
        opts = Options().configure(base_size=32)
        assert opts.min_scale_factor == pytest.approx(0.5)
        opts = opts.configure(min_size=8)
        assert opts.min_scale_factor == pytest.approx(0.25)

    def test_camel_case_keys(self):
        """Option files spelled in camelCase are understood."""
        opts = Options().configure({"baseSize": 16, "minUnitSize": 2, "absoluteUnit": "abs"})
        assert opts.base_size == 16
        assert opts.min_unit_size == 2
        assert opts.absolute_unit == "abs"

    def test_keyword_arguments_win_over_mapping(self):
        opts = Options().configure({"precision": 3}, precision=1)
        assert opts.precision == 1

    def test_none_values_are_omitted(self):
        """None means 'not supplied'."""
        opts = Options(base_size=16).configure(base_size=None, precision=None)
        assert opts.base_size == 16
        assert opts.precision == 5

    def test_unknown_key_warns(self):
        """Unknown keys are ignored with a warning."""
        with pytest.warns(UserWarning, match="unknown option"):
            opts = Options().configure({"baseSise": 10})
        assert opts.base_size == 24

    def test_no_changes_returns_same_object(self):
        opts = Options()
        assert opts.configure() is opts

    def test_normalize_option_keys(self):
        assert normalize_option_keys({"riUnit": "em", "precision": 2}) == {"ri_unit": "em", "precision": 2}


class TestValidation:
    """Configuration errors are raised at configure time."""

    @pytest.mark.parametrize("base_size", [0, -24, float("inf"), float("nan")])
    def test_invalid_base_size(self, base_size):
        with pytest.raises(ConfigurationError, match="base_size"):
            Options(base_size=base_size)

    def test_zero_base_size_via_configure(self):
        """A zero base size never produces an infinite scale factor."""
        with pytest.raises(ConfigurationError):
            Options().configure(base_size=0)

    def test_non_finite_scale_factor(self):
        with pytest.raises(ConfigurationError, match="not finite"):
            Options(base_size=1e-320, min_size=1e300)

    @pytest.mark.parametrize("min_size", [0, -1])
    def test_invalid_min_size(self, min_size):
        with pytest.raises(ConfigurationError, match="min_size"):
            Options(min_size=min_size)

    def test_negative_min_unit_size(self):
        with pytest.raises(ConfigurationError, match="min_unit_size"):
            Options(min_unit_size=-1)

    def test_zero_min_unit_size_allowed(self):
        assert Options(min_unit_size=0).min_unit_size == 0

    @pytest.mark.parametrize("precision", [-1, 2.5, True, "5"])
    def test_invalid_precision(self, precision):
        with pytest.raises(ConfigurationError, match="precision"):
            Options(precision=precision)

    @pytest.mark.parametrize("field_name", ["ri_unit", "unit", "absolute_unit"])
    def test_empty_unit(self, field_name):
        with pytest.raises(ConfigurationError, match=field_name):
            Options(**{field_name: ""})

    def test_string_base_size(self):
        with pytest.raises(ConfigurationError):
            Options(base_size="24")

    def test_configuration_error_is_value_error(self):
        assert issubclass(ConfigurationError, ValueError)


class TestOptionFiles:
    """Test dict and file round trips."""

    def test_options_to_dict(self):
        d = options_to_dict(Options(base_size=16))
        assert d["base_size"] == 16
        assert "min_scale_factor" not in d
        assert options_from_dict(d) == Options(base_size=16)

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "riconv.yaml"
        path.write_text("baseSize: 16\nprecision: 3\n", encoding="utf-8")
        opts = load_options(path)
        assert opts.base_size == 16
        assert opts.precision == 3
        assert opts.unit == "px"

    def test_load_json(self, tmp_path):
        path = tmp_path / "riconv.json"
        path.write_text(json.dumps({"base_size": 20, "ri_unit": "em"}), encoding="utf-8")
        opts = load_options(path)
        assert opts.base_size == 20
        assert opts.ri_unit == "em"

    def test_load_onto_base(self, tmp_path):
        path = tmp_path / "riconv.yaml"
        path.write_text("precision: 2\n", encoding="utf-8")
        opts = load_options(path, base=Options(base_size=10))
        assert opts.base_size == 10
        assert opts.precision == 2

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_options(path) == Options()

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_options(path)

    def test_invalid_values_in_file(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("baseSize: 0\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_options(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_options(tmp_path / "missing.yaml")
