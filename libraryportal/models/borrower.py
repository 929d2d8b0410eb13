from libraryportal.extensions import db


class Borrower(db.Model):
    __tablename__ = "borrowers"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)

    def to_dict(self):
        return {"id": self.id, "name": self.name, "email": self.email}
