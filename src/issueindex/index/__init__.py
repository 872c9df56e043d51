"""Document storage, grouping and catalog export."""
