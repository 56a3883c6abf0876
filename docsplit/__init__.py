"""docsplit: chunk structured documents into navigable multi-page publications."""
