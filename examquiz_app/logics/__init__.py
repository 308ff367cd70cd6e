"""Pure helpers shared by several modules."""
