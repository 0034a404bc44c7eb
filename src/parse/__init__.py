"""Parsing utilities for docsnap."""

from parse.module_decl import DeclarationError, ModuleDecl, read_module_decl

__all__ = [
    "DeclarationError",
    "ModuleDecl",
    "read_module_decl",
]
