from decouple import Csv, config

MONGO_URL = config("MONGO_URL", default="mongodb://localhost:27017")
MONGO_DB = config("MONGO_DB", default="school_duty")

DEFAULT_JWT_SECRET = "change-me"
JWT_SECRET = config("JWT_SECRET", default=DEFAULT_JWT_SECRET)
JWT_ALGORITHM = config("JWT_ALGORITHM", default="HS256")
ADMIN_ROLES = config("ADMIN_ROLES", default="admin", cast=Csv())

API_PREFIX = config("API_PREFIX", default="/api/student")
CORS_ORIGINS = config("CORS_ORIGINS", default="*", cast=Csv())
LOG_LEVEL = config("LOG_LEVEL", default="INFO", cast=str.upper)
