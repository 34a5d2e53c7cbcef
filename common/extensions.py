from flask_smorest import Api

api = Api()

mongo_client = None
mongo_db = None
