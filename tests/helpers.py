"""Tree listing builders and endpoint constants shared by the tests."""

from typing import Any, Dict, List, Optional

SOURCE_LISTING_URL = "https://source.example.com/service/local/repositories/releases/index_content/"
SOURCE_DOWNLOAD_URL = "https://source.example.com/content/repositories/releases/"
TARGET_URL = "https://target.example.com/content/repositories/releases/"


def leaf_node(path: str, pom: bool = True, **extra: Any) -> Dict[str, Any]:
    """Build a leaf artifact node as the tree API returns it."""
    node = {
        "type": "A",
        "leaf": True,
        "nodeName": path.rsplit("/", 1)[-1],
        "path": path,
        "children": None,
        "repositoryId": "releases",
        "locallyAvailable": True,
        "artifactTimestamp": 1700000000000,
        "artifactUri": f"{SOURCE_DOWNLOAD_URL}{path.lstrip('/')}",
        "pomUri": f"{SOURCE_DOWNLOAD_URL}{path.lstrip('/')}.pom" if pom else "",
        "groupId": "com.example",
        "artifactId": "lib",
        "version": "1.0",
        "extension": "jar",
        "packaging": "jar",
    }
    node.update(extra)
    return node


def group_node(path: str, children: Optional[List[Dict[str, Any]]] = None, kind: str = "G") -> Dict[str, Any]:
    """Build a group (or version folder, with kind="V") node."""
    return {
        "type": kind,
        "leaf": False,
        "nodeName": path.rstrip("/").rsplit("/", 1)[-1],
        "path": path,
        "children": children if children is not None else [],
        "repositoryId": "releases",
        "locallyAvailable": False,
    }


def listing(node: Dict[str, Any]) -> Dict[str, Any]:
    """Wrap a node in the listing response envelope."""
    return {"data": node}
