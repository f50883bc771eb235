"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def genbank_text():
    """Return a minimal GenBank record."""
    return (
        "LOCUS       TESTSEQ                   24 bp    DNA     linear   SYN 01-JAN-2000\n"
        "DEFINITION  Synthetic test sequence.\n"
        "ACCESSION   TESTSEQ\n"
        "FEATURES             Location/Qualifiers\n"
        "     source          1..24\n"
        "ORIGIN      \n"
        "        1 atgaaacgcg tttaacgcga tgca\n"
        "//\n"
    )


@pytest.fixture
def embl_text():
    """Return a minimal EMBL record."""
    return (
        "ID   TESTEMBL standard; DNA; SYN; 24 BP.\n"
        "XX\n"
        "DE   Synthetic test sequence.\n"
        "XX\n"
        "SQ   Sequence 24 BP; 8 A; 5 C; 6 G; 5 T; 0 other;\n"
        "     atgaaacgcg tttaacgcga tgca                                        24\n"
        "//\n"
    )


@pytest.fixture
def fasta_text():
    """Return a two-line FASTA record."""
    return ">test gene\natgaaacgcg\ntttaacgcgatgca\n"


@pytest.fixture
def sample_sequence():
    """Return the sequence shared by the record fixtures."""
    return "atgaaacgcgtttaacgcgatgca"


@pytest.fixture
def fasta_file(tmp_path, fasta_text):
    """Write the FASTA fixture to a file and return its path."""
    path = tmp_path / "gene.fa"
    path.write_text(fasta_text)
    return path
