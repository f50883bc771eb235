"""Tests for the reference tables."""

import itertools

from nucleotools.sequence.tables import (
    AMINO_ACID_NAMES,
    DEGENERATE_CODONS,
    GENETIC_CODE,
    NUCLEOTIDE_SYMBOLS,
    TWO_LETTER_CODONS,
    lookup_codon,
)


class TestGeneticCode:
    """Tests for the codon table."""

    def test_all_unambiguous_codons(self):
        """Test that every ACGT triplet is present."""
        for codon in map("".join, itertools.product("acgt", repeat=3)):
            assert codon in GENETIC_CODE

    def test_table_size(self):
        """Test 64 standard codons plus the degenerate ones."""
        assert len(GENETIC_CODE) == 64 + len(DEGENERATE_CODONS)

    def test_stop_codons(self):
        """Test the three stop codons."""
        assert [GENETIC_CODE[c] for c in ("taa", "tag", "tga")] == ["*", "*", "*"]

    def test_start_codon(self):
        """Test ATG."""
        assert GENETIC_CODE["atg"] == "M"

    def test_two_letter_codons(self):
        """Test the fourfold-degenerate families."""
        assert TWO_LETTER_CODONS["gc"] == "A"
        assert len(TWO_LETTER_CODONS) == 8


class TestLookupCodon:
    """Tests for single codon translation."""

    def test_lookup_uppercase(self):
        """Test case-insensitive lookup."""
        assert lookup_codon("TGG") == "W"

    def test_lookup_degenerate(self):
        """Test an ambiguity codon."""
        assert lookup_codon("saa") == "Z"

    def test_lookup_fallback(self):
        """Test the two-letter fallback."""
        assert lookup_codon("acn") == "T"

    def test_lookup_unknown(self):
        """Test an unresolvable codon."""
        assert lookup_codon("tan") == "X"


class TestSymbolTables:
    """Tests for nucleotide and amino-acid names."""

    def test_nucleotide_symbols(self):
        """Test IUPAC symbol expansions."""
        assert set(NUCLEOTIDE_SYMBOLS["n"]) == set("ACGT")
        assert set(NUCLEOTIDE_SYMBOLS["y"]) == set("CT")
        assert NUCLEOTIDE_SYMBOLS["u"] == "U"

    def test_amino_acid_names(self):
        """Test three-letter codes and names."""
        assert AMINO_ACID_NAMES["M"] == ("Met", "Methionine")
        assert AMINO_ACID_NAMES["*"] == ("Ter", "Stop")

    def test_translation_output_is_named(self):
        """Test that every residue the code can produce has a name."""
        residues = set(GENETIC_CODE.values()) | set(TWO_LETTER_CODONS.values()) | {"X"}
        assert residues <= set(AMINO_ACID_NAMES)
