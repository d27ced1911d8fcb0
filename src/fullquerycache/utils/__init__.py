"""Utility helpers for fullquerycache."""
