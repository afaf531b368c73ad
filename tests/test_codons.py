"""
Tests for the codon table.
"""

import logging
from collections import Counter

import pytest

from bioseq.codons import (
    CODON_TABLE, STOP, STOP_CODONS, UNKNOWN_RESIDUE,
    translate, translate_codon,
)


class TestCodonTable:
    """Tests for the standard genetic code."""

    def test_table_is_complete(self):
        assert len(CODON_TABLE) == 64
        assert all(len(codon) == 3 and set(codon) <= set("AUCG") for codon in CODON_TABLE)

    def test_stop_codons(self):
        assert STOP_CODONS == {"UAA", "UAG", "UGA"}

    def test_codon_counts_per_amino_acid(self):
        counts = Counter(aa for aa in CODON_TABLE.values() if aa is not STOP)
        assert len(counts) == 20
        assert counts["L"] == 6
        assert counts["S"] == 6
        assert counts["R"] == 6
        assert counts["M"] == 1
        assert counts["W"] == 1
        assert counts["I"] == 3

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            CODON_TABLE["AUG"] = "X"


class TestTranslate:
    """Tests for codon translation."""

    def test_translate_codon(self):
        assert translate_codon("AUG") == "M"
        assert translate_codon("UGG") == "W"
        assert translate_codon("UAA") is STOP

    def test_unknown_codon(self, caplog):
        with caplog.at_level(logging.WARNING, logger="bioseq.codons"):
            assert translate_codon("NNN") == UNKNOWN_RESIDUE
        assert "Unknown codon" in caplog.text

    def test_translate(self):
        assert translate("AUGCCUUAAGGG") == "MP"
        assert translate("AUGUUUGGG") == "MFG"
        assert translate("AUGUUUGG") == "MF"
        assert translate("AUGNNNUUU") == "MXF"
