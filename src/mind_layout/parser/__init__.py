"""Project file parsing and the mind map data model."""

from mind_layout.parser.model import BLOCKS, HIERARCHY, Dims, Edge, MindGraph, Node, Point
from mind_layout.parser.project import dump_project, parse_project

__all__ = [
    "BLOCKS",
    "HIERARCHY",
    "Dims",
    "Edge",
    "MindGraph",
    "Node",
    "Point",
    "dump_project",
    "parse_project",
]
