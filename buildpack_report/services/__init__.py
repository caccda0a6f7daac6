"""Services: API client, catalog, traversal and rendering."""
