"""
Core Form Model Objects

Defines the data structures handed to the URL builder.

These are pure data classes representing:
    - Entries (one prefilled answer per form question)
    - Form specs (root container: base URL + ordered entries)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about YAML/JSON or the command line
        - Are never mutated by the builder
        - Represent input, not behavior
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Entry:
    """
    A single prefilled answer for one form question.

    Properties:
        question_id:
            The numeric part of the form field name, without the "entry." prefix
            Examples: "917226918", "237993201.other_option_response"

        answer:
            Value written into the field. The literal "{today}" is replaced
            with the current date at build time.

        comment:
            Free-form note for whoever maintains the config.
            Never read when building the URL.
    """

    question_id: str
    answer: str = ""
    comment: str = ""


@dataclass
class FormSpec:
    """
    Root container for a prefilled form definition.

    Properties:
        base_url:
            The form URL as copied from the "Send" dialog
            Example: https://docs.google.com/forms/d/e/XXXX/viewform?usp=sf_link

        entries:
            Ordered entries. Order matters only for duplicates: the later
            entry for the same question_id wins.
    """

    base_url: str
    entries: List[Entry] = field(default_factory=list)

    def get_entry(self, question_id: str) -> Optional[Entry]:
        """
        Retrieve the effective entry for a question.

        Args:
            question_id: Question identifier

        Returns:
            The last Entry with that id, or None if not found
        """
        found = None
        for entry in self.entries:
            if entry.question_id == question_id:
                found = entry
        return found

    def duplicate_question_ids(self) -> List[str]:
        """Question ids that appear more than once, in first-seen order."""
        seen = set()
        duplicates: List[str] = []
        for entry in self.entries:
            if entry.question_id in seen and entry.question_id not in duplicates:
                duplicates.append(entry.question_id)
            seen.add(entry.question_id)
        return duplicates
