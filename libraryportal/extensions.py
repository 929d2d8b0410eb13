from flasgger import Swagger
from flask_cors import CORS
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

from libraryportal.apidocs import API_DOCS

db = SQLAlchemy()
migrate = Migrate()
cors = CORS()
swagger = Swagger(template=API_DOCS)
