"""Compiler layer — lexer, parser, formatter, and the compile pipeline.

The lexer and parser know nothing about the set of commit kinds or any
other semantic rule; they only check shape. Meaning is assigned by
:meth:`grit.domain.message.Message.from_ast`.
"""
