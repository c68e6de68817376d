"""Application layer: catalogs, operators, formatting, engine, evaluation."""
