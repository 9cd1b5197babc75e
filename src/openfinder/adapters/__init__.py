"""Provider adapter layer — Connectors for external open-content catalogs.

Built-in adapters:
  - openlibrary: OpenLibrary search API (book metadata)
  - gutenberg: Project Gutenberg via the Gutendex API (public-domain texts)
  - pixabay: Pixabay image API (stock photos, API key required)
  - unsplash: Unsplash search API (stock photos, access key required)
  - internet_archive: Internet Archive advanced search (books, video, data)

Implement ``ProviderAdapter`` to connect another catalog.
"""
