"""Standalone helpers for characters, numbers, strings, memory, formatting, lists and line reading."""