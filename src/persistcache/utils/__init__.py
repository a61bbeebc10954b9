"""Utility helpers for persistcache."""
