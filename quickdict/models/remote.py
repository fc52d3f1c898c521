"""Data models for entries returned by the online dictionary service."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class RemoteDefinition:
    """A single sense of a remote entry."""

    definition: str
    example: str | None = None


@dataclass
class RemoteMeaning:
    """A part-of-speech grouping of remote definitions."""

    part_of_speech: str
    definitions: list[RemoteDefinition] = field(default_factory=list)
    synonyms: list[str] = field(default_factory=list)


@dataclass
class RemoteEntry:
    """One entry of the Free Dictionary API payload."""

    word: str
    phonetic: str | None = None
    phonetics: list[str] = field(default_factory=list)
    meanings: list[RemoteMeaning] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "RemoteEntry":
        """Build an entry from the decoded API JSON.

        Args:
            data: One element of the API's top-level list

        Returns:
            Parsed RemoteEntry

        Raises:
            ValueError: If the element is not a JSON object with a word
        """
        if not isinstance(data, dict) or not data.get("word"):
            raise ValueError("Remote entry has no word")

        phonetics = [
            p["text"]
            for p in data.get("phonetics") or []
            if isinstance(p, dict) and isinstance(p.get("text"), str) and p["text"]
        ]

        meanings = []
        for meaning in data.get("meanings") or []:
            if not isinstance(meaning, dict):
                continue
            definitions = [
                RemoteDefinition(
                    definition=str(d.get("definition", "")),
                    example=str(d["example"]) if d.get("example") else None,
                )
                for d in meaning.get("definitions") or []
                if isinstance(d, dict)
            ]
            meanings.append(
                RemoteMeaning(
                    part_of_speech=str(meaning.get("partOfSpeech") or ""),
                    definitions=definitions,
                    synonyms=[str(s) for s in meaning.get("synonyms") or []],
                )
            )

        return cls(
            word=str(data["word"]),
            phonetic=str(data["phonetic"]) if data.get("phonetic") else None,
            phonetics=phonetics,
            meanings=meanings,
        )
