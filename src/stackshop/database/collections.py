"""MongoDB collection names."""

USERS = "users"
POSTS = "posts"
TECHS = "techs"
PRODUCTS = "products"

# Notes:
# - users embed their orders; there is no orders collection.
# - posts.tech and techs.posts hold ObjectId references in both directions.
