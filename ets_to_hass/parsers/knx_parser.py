"""KNX Project Parser Module

Reads project.xml and 0.xml from .knxproj files and turns them into generic
trees: every element becomes a dict holding its attributes as strings and its
child elements as lists keyed by tag name (namespaces removed).
"""
import logging
import zipfile
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any, Dict, List, Optional, Union

from xknxproject.exceptions import XknxProjectException
from xknxproject.zip import extract

from ..exceptions import MalformedProjectError, ProjectFileError

logger = logging.getLogger(__name__)

# extension of ETS project file
ETS_EXT = '.knxproj'

Tree = Dict[str, Any]


@dataclass
class ProjectTrees:
    """Generic trees of one project: info from project.xml, data from 0.xml"""
    info: Tree
    data: Tree


def strip_namespace(tag: str) -> str:
    """Return a tag without its "{namespace}" prefix."""
    return tag.rsplit('}', 1)[-1]


def element_to_tree(element: ET.Element) -> Tree:
    """
    Convert an XML element into a generic tree.

    Args:
        element: Parsed XML element

    Returns:
        Dictionary with attributes as strings and child elements as lists
    """
    tree: Tree = dict(element.attrib)
    for child in element:
        tree.setdefault(strip_namespace(child.tag), []).append(element_to_tree(child))
    return tree


def parse_xml(source: Union[IO[bytes], str, Path]) -> Tree:
    """Parse an XML stream or file into a generic tree rooted below the document element."""
    try:
        root = ET.parse(source).getroot()
    except ET.ParseError as exc:
        raise ProjectFileError(f"Cannot parse project XML: {exc}") from exc
    return element_to_tree(root)


def dig_xml(entry_point: Tree, path: List[str]) -> Tree:
    """
    Walk down a generic tree where every level holds exactly one element.

    Args:
        entry_point: Tree to start from
        path: Tag names to follow

    Returns:
        The tree found at the end of the path

    Raises:
        MalformedProjectError: If a level is missing or empty
    """
    if not isinstance(entry_point, dict):
        raise MalformedProjectError(f"Wrong entry point: {type(entry_point).__name__}, expect dict")
    for name in path:
        if name not in entry_point:
            raise MalformedProjectError(
                f"Cannot find level {name} in XML, have {','.join(entry_point.keys())}"
            )
        children = entry_point[name]
        if not children:
            raise MalformedProjectError(f"Expect one element in {name}")
        entry_point = children[0]
    return entry_point


class KNXParser:
    """Parser for KNX project files (.knxproj)"""

    def __init__(self, knxproj_path: Union[str, Path], password: Optional[str] = None):
        """
        Initialize KNX Parser.

        Args:
            knxproj_path: Path to the .knxproj file
            password: Password of a protected project
        """
        self.knxproj_path = Path(knxproj_path)
        self.password = password

    def parse(self) -> ProjectTrees:
        """
        Parse the KNX project file.

        Returns:
            ProjectTrees with project information and installation data

        Raises:
            ProjectFileError: If the archive cannot be read
        """
        if self.knxproj_path.suffix != ETS_EXT:
            raise ProjectFileError(f"ETS file must end with {ETS_EXT}: {self.knxproj_path}")

        logger.info("Parsing KNX project: %s", self.knxproj_path)
        try:
            with extract(self.knxproj_path, self.password) as contents:
                with contents.open_project_meta() as meta_file:
                    info = parse_xml(meta_file)
                with contents.open_project_0() as data_file:
                    data = parse_xml(data_file)
        except (XknxProjectException, zipfile.BadZipFile, KeyError, OSError) as exc:
            raise ProjectFileError(f"Cannot read project {self.knxproj_path}: {exc}") from exc

        return ProjectTrees(info=info, data=data)
