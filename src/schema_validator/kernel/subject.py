"""Subject name derivation from schema file paths."""

from os import PathLike
from typing import Union


def derive_subject(path: Union[str, PathLike]) -> str:
    """
    Derive the registry subject for a proposed schema file.

    The directory part and everything from the first dot of the file name
    are dropped: "schemas/orders.v2.avsc" -> "orders".

    Raises:
        ValueError: if the path is blank or yields an empty subject.
    """
    text = str(path).replace("\\", "/")
    if not text.strip():
        raise ValueError("Schema path must not be blank")
    subject = text.split("/")[-1].split(".")[0]
    if not subject.strip():
        raise ValueError(f"Cannot derive a subject name from '{text}'")
    return subject
