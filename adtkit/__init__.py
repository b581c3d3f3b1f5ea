"""Stacks, queues, ordered sets (BST, AVL, B-tree) and an ordered map."""

__version__ = "0.1.0"
__all__ = ["avl", "base", "bst", "btree", "btree_node", "fifo", "stack", "treemap"]