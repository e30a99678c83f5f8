import os

from flask import Flask, abort, send_file

app = Flask(__name__)
FTP_DIR = "ftp"


# vuln-code-snippet start directoryListingChallenge accessLogDisclosureChallenge
@app.route("/ftp/<path:name>")
def serve_ftp_file(name):
    path = os.path.join(FTP_DIR, name)  # vuln-code-snippet vuln-line accessLogDisclosureChallenge
    if not os.path.exists(path):
        abort(404)
    if os.path.isdir(path):  # vuln-code-snippet vuln-line directoryListingChallenge
        return "\n".join(os.listdir(path))  # vuln-code-snippet vuln-line directoryListingChallenge
    return send_file(path)  # vuln-code-snippet neutral-line accessLogDisclosureChallenge
# vuln-code-snippet end directoryListingChallenge accessLogDisclosureChallenge
