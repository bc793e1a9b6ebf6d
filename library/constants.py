"""Fixed names and limits shared by the stores and the HTTP layer."""

# Elasticsearch
BOOKS_INDEX = "books"
BOOKS_QUERY_SIZE = 1000
UNIQUE_AUTHORS_AGGREGATION = "unique_authors"

# Redis
USER_ACTIVITY_ACTIONS = 3
USER_ACTIVITY_KEY = "book_service_exercise:users:activities:{username}"

# Routes recorded in user activity
BOOKS_ROUTE = "/books"
BOOK_ROUTE = "/books/{book_id}"
STORE_ROUTE = "/store"
