"""Consistency audit for processed donation data."""
