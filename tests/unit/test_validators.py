"""Tests for company id derivation."""

import pytest

from src.marketplace.core.validators import MAX_COMPANY_ID_LENGTH, company_id_from_name

pytestmark = pytest.mark.unit


class TestCompanyIdFromName:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Slack", "slack"),
            ("Acme Corp", "acmecorp"),
            ("  Acme   Corp  ", "acmecorp"),
            ("Acme\tCorp\nLtd", "acmecorpltd"),
            ("ACME", "acme"),
            ("Acme-Corp 2", "acme-corp2"),
        ],
    )
    def test_derivation(self, name, expected):
        assert company_id_from_name(name) == expected

    def test_names_differing_only_in_case_and_spacing_collide(self):
        assert company_id_from_name("Acme Corp") == company_id_from_name("acmecorp")

    @pytest.mark.parametrize("name", ["", " ", "\t\n"])
    def test_whitespace_only_name_is_rejected(self, name):
        with pytest.raises(ValueError, match="non-whitespace"):
            company_id_from_name(name)

    def test_max_length(self):
        assert company_id_from_name("a" * MAX_COMPANY_ID_LENGTH) == "a" * MAX_COMPANY_ID_LENGTH
        with pytest.raises(ValueError, match="too long"):
            company_id_from_name("a" * (MAX_COMPANY_ID_LENGTH + 1))
