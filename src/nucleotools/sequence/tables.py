"""Static reference tables: genetic code, nucleotide symbols, amino acids."""

from Bio.Data import CodonTable, IUPACData

_STANDARD = CodonTable.unambiguous_dna_by_id[1]

# Nucleotide alphabet accepted without a composition warning (i = inosine)
NUCLEOTIDE_ALPHABET = frozenset("abcdghikmnrstuvwy")

# Broader alphabet used to flag a possible amino-acid sequence
AMINO_ACID_ALPHABET = frozenset("abcdefghiklmnpqrstuvwxyz")

# Watson-Crick / IUPAC ambiguity complements, case preserved
COMPLEMENT_TABLE = str.maketrans(
    "acgtmrwsykvhdbunACGTMRWSYKVHDBUN",
    "tgcakywsrmbdhvanTGCAKYWSRMBDHVAN",
)

# Codons whose ambiguity symbols still resolve to a single residue
DEGENERATE_CODONS = {
    "tty": "F", "ttr": "L", "tay": "Y", "tgy": "C",
    "cay": "H", "car": "Q", "aay": "N", "aar": "K",
    "agy": "S", "agr": "R", "gay": "D", "gar": "E",
    "ath": "I", "aty": "I", "atw": "I", "atm": "I",
    "rat": "B", "rac": "B", "saa": "Z", "sag": "Z",
}

# Codon families where the third position is fully degenerate
TWO_LETTER_CODONS = {
    "tc": "S", "ct": "L", "cc": "P", "cg": "R",
    "ac": "T", "gt": "V", "gc": "A", "gg": "G",
}


def _build_genetic_code() -> dict[str, str]:
    code = {codon.lower(): aa for codon, aa in _STANDARD.forward_table.items()}
    code.update({codon.lower(): "*" for codon in _STANDARD.stop_codons})
    code.update(DEGENERATE_CODONS)
    return code


GENETIC_CODE = _build_genetic_code()

UNKNOWN_RESIDUE = "X"
STOP_SYMBOL = "*"

# Symbol -> possible bases; adds U and inosine to the IUPAC DNA values
NUCLEOTIDE_SYMBOLS = {
    symbol.lower(): bases
    for symbol, bases in IUPACData.ambiguous_dna_values.items()
    if symbol.lower() in NUCLEOTIDE_ALPHABET
}
NUCLEOTIDE_SYMBOLS["u"] = "U"
NUCLEOTIDE_SYMBOLS["i"] = "I"

_AMINO_ACID_FULL_NAMES = {
    "A": "Alanine",
    "B": "Aspartic acid or Asparagine",
    "C": "Cysteine",
    "D": "Aspartic acid",
    "E": "Glutamic acid",
    "F": "Phenylalanine",
    "G": "Glycine",
    "H": "Histidine",
    "I": "Isoleucine",
    "K": "Lysine",
    "L": "Leucine",
    "M": "Methionine",
    "N": "Asparagine",
    "P": "Proline",
    "Q": "Glutamine",
    "R": "Arginine",
    "S": "Serine",
    "T": "Threonine",
    "V": "Valine",
    "W": "Tryptophan",
    "X": "Unknown",
    "Y": "Tyrosine",
    "Z": "Glutamic acid or Glutamine",
}

# One-letter code -> (three-letter code, full name)
AMINO_ACID_NAMES = {
    letter: (IUPACData.protein_letters_1to3_extended[letter], name)
    for letter, name in _AMINO_ACID_FULL_NAMES.items()
}
AMINO_ACID_NAMES[STOP_SYMBOL] = ("Ter", "Stop")


def lookup_codon(codon: str) -> str:
    """
    Translate a single codon, falling back to its first two letters.

    Args:
        codon: Three nucleotides, any case

    Returns:
        One-letter amino acid, '*' for stop or 'X' when unresolvable
    """
    codon = codon.lower()
    if codon in GENETIC_CODE:
        return GENETIC_CODE[codon]
    return TWO_LETTER_CODONS.get(codon[:2], UNKNOWN_RESIDUE)
