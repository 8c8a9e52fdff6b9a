"""Styled Excel output for reports."""
from .writer import Column, ExcelWriter
