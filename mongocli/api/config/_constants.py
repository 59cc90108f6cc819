DEFAULT_URI = "mongodb://127.0.0.1:27017/mission-5"
DEFAULT_DATABASE = "mission-5"
DEFAULT_COLLECTION = "users"

URI_ENV = "MONGODB_URI"
COLLECTION_ENV = "DEFAULT_COLLECTION"
HOME_ENV = "MONGOCLI_HOME"
