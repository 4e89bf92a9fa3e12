"""Structure validation and canonicalization with RDKit.

Monomers that are not in the store may be written directly as SMILES.  The
resolver hands such strings to an ``RDKitChemistry`` instance, which checks
that RDKit can parse them and produces the canonical form stored on the ad
hoc monomer.
"""

from rdkit import Chem, rdBase
from rdkit.Chem.rdchem import Mol

from helmkit.data.errors import InvalidStructureError


class RDKitChemistry:
    """Validate and canonicalize SMILES strings."""

    def _parse(self, smiles: str) -> Mol:
        # Disable rdkit warnings
        blocker = rdBase.BlockLogs()  # noqa: F841
        mol = Chem.MolFromSmiles(smiles) if smiles else None
        if mol is None:
            msg = f"Invalid SMILES: {smiles}"
            raise InvalidStructureError(msg)
        return mol

    def validate(self, smiles: str) -> None:
        """Raise ``InvalidStructureError`` if ``smiles`` is not a valid structure."""
        self._parse(smiles)

    def canonicalize(self, smiles: str) -> str:
        """Return the canonical SMILES of a structure.

        Parameters
        ----------
        smiles : str
            The structure to canonicalize.

        Returns
        -------
        str
            RDKit's canonical SMILES.

        Raises
        ------
        InvalidStructureError
            If the structure cannot be parsed.

        """
        return Chem.MolToSmiles(self._parse(smiles))
