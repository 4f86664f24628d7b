"""Local community detection around a seed vertex."""
