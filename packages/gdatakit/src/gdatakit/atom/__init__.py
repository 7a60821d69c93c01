"""Atom syndication format element types."""

from gdatakit.atom.author import Author
from gdatakit.atom.category import Category
from gdatakit.atom.generator import Generator
from gdatakit.atom.link import Link

__all__ = ["Author", "Category", "Generator", "Link"]
