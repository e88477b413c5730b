"""Helpers around the identifier source: family manifests and the names shown for matched pairs."""

from pathlib import PurePosixPath

from pydantic import RootModel, field_validator

from src.core.exceptions import GameStateError, InvalidRequestError


def display_name(identifier: str) -> str:
    """'images/Gordon Bodily.jpg' -> 'Gordon Bodily'. Plain names come back unchanged."""
    return PurePosixPath(identifier.replace("\\", "/")).stem or identifier


class FamilyManifest(RootModel[dict[str, list[str]]]):
    """Family name -> photo identifiers, as listed in the manifest the frontend loads."""

    @field_validator("root")
    @classmethod
    def validate_families(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        for family, members in value.items():
            if not family.strip():
                raise InvalidRequestError("Family names cannot be blank.")
            if len(set(members)) != len(members):
                raise InvalidRequestError(
                    f"Family {family!r} lists the same photo more than once."
                )
        return value

    def families(self) -> list[str]:
        return list(self.root.keys())

    def members(self, family: str) -> list[str]:
        if family not in self.root:
            raise GameStateError(
                f"Unknown family {family!r}. Pick one from {', '.join(self.families())}"
            )
        return list(self.root[family])
