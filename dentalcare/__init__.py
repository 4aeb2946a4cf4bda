"""Dental health simulation: teeth, skill gate, formulas, corpse practice."""
