"""
Service layer.

``ConceptStore`` owns persistence, ``csv_loader`` turns a tabular
resource into concept records and ``CatalogService`` orchestrates both.
Only the catalog service mutates the store.
"""
