from flask import Flask, jsonify, request

from models import db

app = Flask(__name__)


# vuln-code-snippet start loginAdminChallenge loginBenderChallenge
@app.route("/rest/user/login", methods=["POST"])
def login():
    email = request.json.get("email", "")
    password = request.json.get("password", "")
    # vuln-code-snippet hide-start
    if not email:
        return jsonify(error="Email required"), 400
    # vuln-code-snippet hide-end
    query = (
        f"SELECT * FROM users WHERE email = '{email}' "  # vuln-code-snippet vuln-line loginAdminChallenge loginBenderChallenge
        f"AND password = '{hash_password(password)}' AND deleted_at IS NULL"  # vuln-code-snippet neutral-line loginAdminChallenge
    )
    user = db.execute(query).fetchone()  # vuln-code-snippet neutral-line loginBenderChallenge
    if user is None:
        return jsonify(error="Invalid email or password."), 401
    return jsonify(authentication=issue_token(user))
# vuln-code-snippet end loginAdminChallenge loginBenderChallenge


def hash_password(password):
    import hashlib

    return hashlib.md5(password.encode()).hexdigest()  # vuln-code-snippet hide-line


def issue_token(user):
    return {"token": str(user["id"])}
