#!/usr/bin/env python3
"""
Basic example of driving a navigation tree the way an admin UI does.

This example demonstrates:
- Loading a section tree (cached after the first call)
- Expanding nodes on demand
- Recovering from a failed expand
- Resolving a node's context menu
"""

import asyncio
import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from navtreelib import SourceFailure
from navtreelib.aio import MappingIconTranslator, TreeService
from navtreelib.testing import InMemoryDataSource


def print_tree(node, indent=0):
    for child in node.children:
        marker = '-' if child.expanded else '+'
        print(f"{'  ' * indent}{marker} {child.name} ({child.route_path})")
        print_tree(child, indent + 1)


async def main():
    """Expand a small content tree and print it."""
    logging.basicConfig(level=logging.INFO)

    source = InMemoryDataSource(
        trees={'content': {
            'id': -1,
            'name': 'Content',
            'metaData': {'treeType': 'content'},
            'children': [{'id': 1050, 'name': 'Home', 'hasChildren': True}],
        }},
        children={
            1050: [{'id': 1051, 'name': 'About'}, {'id': 1052, 'name': 'News'}],
            1052: [{'id': 1053, 'name': 'Launch'}],
        },
        menus={1050: [{'alias': 'create', 'name': 'Create', 'cssclass': '.sprNew'}]},
    )

    async with TreeService(source, icon_translator=MappingIconTranslator({'.sprNew': 'icon-add'})) as trees:
        tree = await trees.get_tree(section='content')
        home = trees.get_child_node(tree.root, 1050)
        await trees.load_node_children(home)

        news = trees.get_child_node(home, 1052)
        source.fail_children(1052, ConnectionError('backend offline'))
        result = await trees.load_node_children(news)
        if isinstance(result, SourceFailure):
            print(f"Expanding '{news.name}' failed ({result.reason}), retrying")
            source.recover()
            await trees.load_node_children(news)

        print(f"\n{tree.name} tree:")
        print_tree(tree.root)

        create = await trees.get_menu_item_by_alias(home, 'create')
        print(f"\nMenu item '{create.alias}' uses icon {create.icon}")


if __name__ == "__main__":
    asyncio.run(main())
