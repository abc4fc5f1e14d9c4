"""Core update selection logic: catalog parsing, classification, gating, installs."""
