"""Global constants for the helmkit notation core.

This module centralizes the hard-coded vocabularies and lookup tables used by
the notation model, monomer resolution, and the RNA duplex algorithms.  The
constants are organized into the following sections:

Polymers
--------
- ``polymer_types`` : Polymer kind vocabulary (RNA, PEPTIDE, CHEM, BLOB).
  DNA strands share the RNA kind.
- ``monomer_types`` : Monomer role vocabulary (Backbone, Branch, Undefined).
- ``default_count`` / ``annotation_separator`` / ``antisense_id`` : Defaults
  used by the mutation API and duplex construction.

Nucleic acids
-------------
- ``complement_map`` : Single base to complementary base.  Not an
  involution: T maps to A but nothing maps to T.
- ``rna_sugar`` / ``dna_sugar`` / ``linker`` : Monomer IDs the sequence reader
  uses to build nucleotides.
- ``rna_letters`` / ``dna_letters`` : Alphabets accepted by the sequence reader.
- ``nucleotide_templates`` : Symbol to nucleotide notation (e.g. dA -> [dR](A)P).

Monomers
--------
- ``monomer_library`` : Bundled monomer definitions (RNA sugars, bases and
  linkers, the 20 standard amino acids) used by the default monomer store.
"""

####################################################################################################
# POLYMERS
####################################################################################################

# Polymer kind vocabulary.  The kind tag is the alphabetic prefix of a polymer
# ID, e.g. "RNA1" -> "RNA", "PEPTIDE2" -> "PEPTIDE".
polymer_types = [
    "RNA",      # nucleic acids, both RNA and DNA
    "PEPTIDE",  # amino acid chains
    "CHEM",     # single chemical modifiers
    "BLOB",     # entities of unknown structure
]
polymer_type_ids = {t: i for i, t in enumerate(polymer_types)}

# Monomer roles inside a polymer.  Only "Branch" monomers (nucleobases)
# contribute letters to an RNA natural analog sequence.
monomer_types = [
    "Backbone",
    "Branch",
    "Undefined",
]

# Count assigned to a monomer reference when none is given or when reset.
default_count = "1"

# Separator placed between an existing polymer annotation and a new one.
annotation_separator = " | "

# Polymer ID of the antisense strand built by duplex construction.
antisense_id = "RNA2"

# Descriptor stored in the interconnection registry for hybridization pairs.
pair_descriptor = "pair"

####################################################################################################
# NUCLEIC ACIDS
####################################################################################################

complement_map = {
    "A": "U",
    "G": "C",
    "C": "G",
    "U": "A",
    "T": "A",
    "X": "X",
}

# Monomer IDs used to compose nucleotides from single letters.
rna_sugar = "R"
dna_sugar = "dR"
linker = "P"

rna_letters = {"A", "G", "C", "U", "X"}
dna_letters = {"A", "G", "C", "T", "X"}

# Symbol -> nucleotide notation.  Multi character monomer IDs are enclosed in
# square brackets, the base is enclosed in parentheses.
nucleotide_templates = {
    "A": "R(A)P",
    "C": "R(C)P",
    "G": "R(G)P",
    "U": "R(U)P",
    "T": "R(T)P",
    "X": "R(X)P",
    "dA": "[dR](A)P",
    "dC": "[dR](C)P",
    "dG": "[dR](G)P",
    "dT": "[dR](T)P",
    "sA": "R(A)[sP]",
    "sC": "R(C)[sP]",
    "sG": "R(G)[sP]",
    "sU": "R(U)[sP]",
    "mA": "[mR](A)P",
    "mC": "[mR](C)P",
    "mG": "[mR](G)P",
    "mU": "[mR](U)P",
}

####################################################################################################
# MONOMERS
####################################################################################################

# Attachment points are written as "[*:n]" dummy atoms so that rdkit can parse
# every bundled structure.
monomer_library = {
    "monomers": [
        # --- RNA sugars ---
        {
            "monomer_id": "R",
            "polymer_type": "RNA",
            "monomer_type": "Backbone",
            "natural_analog": "R",
            "smiles": "OC1C(O[*:2])C(CO[*:1])OC1[*:3]",
        },
        {
            "monomer_id": "dR",
            "polymer_type": "RNA",
            "monomer_type": "Backbone",
            "natural_analog": "R",
            "smiles": "C1C(O[*:2])C(CO[*:1])OC1[*:3]",
        },
        {
            "monomer_id": "mR",
            "polymer_type": "RNA",
            "monomer_type": "Backbone",
            "natural_analog": "R",
            "smiles": "COC1C(O[*:2])C(CO[*:1])OC1[*:3]",
        },
        # --- RNA linkers ---
        {
            "monomer_id": "P",
            "polymer_type": "RNA",
            "monomer_type": "Backbone",
            "natural_analog": "P",
            "smiles": "OP(=O)([*:1])[*:2]",
            "alternate_id": "P",
        },
        {
            "monomer_id": "sP",
            "polymer_type": "RNA",
            "monomer_type": "Backbone",
            "natural_analog": "P",
            "smiles": "OP(=S)([*:1])[*:2]",
            "alternate_id": "sP",
        },
        # --- RNA bases ---
        {
            "monomer_id": "A",
            "polymer_type": "RNA",
            "monomer_type": "Branch",
            "natural_analog": "A",
            "smiles": "Nc1ncnc2n([*:1])cnc12",
        },
        {
            "monomer_id": "C",
            "polymer_type": "RNA",
            "monomer_type": "Branch",
            "natural_analog": "C",
            "smiles": "Nc1ccn([*:1])c(=O)n1",
        },
        {
            "monomer_id": "G",
            "polymer_type": "RNA",
            "monomer_type": "Branch",
            "natural_analog": "G",
            "smiles": "Nc1nc2n([*:1])cnc2c(=O)[nH]1",
        },
        {
            "monomer_id": "T",
            "polymer_type": "RNA",
            "monomer_type": "Branch",
            "natural_analog": "T",
            "smiles": "Cc1cn([*:1])c(=O)[nH]c1=O",
        },
        {
            "monomer_id": "U",
            "polymer_type": "RNA",
            "monomer_type": "Branch",
            "natural_analog": "U",
            "smiles": "O=c1ccn([*:1])c(=O)[nH]1",
        },
        {
            "monomer_id": "X",
            "polymer_type": "RNA",
            "monomer_type": "Branch",
            "natural_analog": "X",
            "smiles": None,
        },
        # --- Amino acids (natural analog == ID) ---
        *[
            {
                "monomer_id": letter,
                "polymer_type": "PEPTIDE",
                "monomer_type": "Backbone",
                "natural_analog": letter,
                "smiles": None,
            }
            for letter in "ACDEFGHIKLMNPQRSTVWY"
        ],
    ]
}

# One-letter amino acid codes accepted by the peptide sequence reader.
prot_letters = set("ACDEFGHIKLMNPQRSTVWY")
