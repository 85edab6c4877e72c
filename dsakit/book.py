"""A book outline of chapters, sections and subsections."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Section:
    """A section title and its subsection titles."""

    title: str
    subsections: list[str] = field(default_factory=list)


@dataclass
class Chapter:
    """A chapter title and its sections."""

    title: str
    sections: list[Section] = field(default_factory=list)


@dataclass
class Book:
    """A book title and its chapters."""

    title: str
    chapters: list[Chapter] = field(default_factory=list)

    def render(self) -> str:
        """The outline, indented by level."""
        lines = ["", f"Book: {self.title}"]
        for chapter in self.chapters:
            lines.append(f"  Chapter: {chapter.title}")
            for section in chapter.sections:
                lines.append(f"    Section: {section.title}")
                lines.extend(f"      Subsection: {sub}" for sub in section.subsections)
        return "\n".join(lines) + "\n"