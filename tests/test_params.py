"""Tests for shared plot parameters."""

import pytest

from genobox.params import Params, fill_defaults, parse_params


class TestParams:
    """Test the Params container."""

    def test_none_values_dropped(self):
        """Test None values are not stored."""
        params = Params(chrom="chr21", chromstart=None)
        assert "chrom" in params
        assert "chromstart" not in params
        assert params.chrom == "chr21"

    def test_missing_attribute(self):
        """Test unknown attributes raise AttributeError."""
        with pytest.raises(AttributeError):
            Params().chrom

    def test_add(self):
        """Test combined Params prefer the right operand."""
        combined = Params(chrom="chr21", fill="red") + Params(fill="blue")
        assert combined.to_dict() == {"chrom": "chr21", "fill": "blue"}

    def test_yaml_roundtrip(self, tmp_path):
        """Test YAML files restore tuples from lists."""
        path = tmp_path / "params.yaml"
        Params(chrom="chr21", chromstart=28000000, just=("left", "top")).to_yaml(path)
        loaded = Params.from_yaml(path)
        assert loaded.chromstart == 28000000
        assert loaded.just == ("left", "top")

    def test_yaml_must_be_mapping(self, tmp_path):
        """Test a YAML list is rejected."""
        path = tmp_path / "params.yaml"
        path.write_text("- chr21\n- chr22\n")
        with pytest.raises(ValueError, match="mapping"):
            Params.from_yaml(path)


class TestParseParams:
    """Test merging of function arguments with Params."""

    def test_explicit_arguments_win(self):
        """Test explicit arguments are kept over Params values."""
        merged = parse_params(Params(fill="red", alpha=0.5), {"fill": "blue", "alpha": None})
        assert merged == {"fill": "blue", "alpha": 0.5}

    def test_params_type_checked(self):
        """Test a plain dict is not accepted as params."""
        with pytest.raises(TypeError):
            parse_params({"fill": "red"}, {"fill": None})

    def test_fill_defaults(self):
        """Test defaults apply only to values still unset."""
        values = fill_defaults({"fill": None, "alpha": 0.2}, {"fill": "lightgrey", "alpha": 0.4})
        assert values == {"fill": "lightgrey", "alpha": 0.2}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
