from toyrsa.rsa.rsa_cipher import Encrypt, Decrypt
from toyrsa.rsa.rsa_cipher_demo import ToyRSADemo
from toyrsa.constants import PUBLIC_EXPONENT
from toyrsa.errors import FatalError
from flask import Flask, request, jsonify
import os

app = Flask(__name__)

rsacipherdemo = ToyRSADemo

HOST = os.environ.get("TOYRSA_HOST", "0.0.0.0")
PORT = int(os.environ.get("TOYRSA_PORT", "5000"))
DEBUG = os.environ.get("TOYRSA_DEBUG", "1") == "1"


def _as_int(value, name: str) -> int:
    # bool is an int subclass, reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{name}' must be an integer")
    return value


def _int_field(data: dict, name: str) -> int:
    return _as_int(data.get(name), name)


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return data

# ============================================
# ERROR HANDLERS
# ============================================

@app.errorhandler(ValueError)
def handle_value_error(err):
    return jsonify({"success": False, "error": str(err)}), 400

@app.errorhandler(FatalError)
def handle_fatal_error(err):
    return jsonify({"success": False, "error": str(err)}), 500

# ============================================
# ROUTES - TOY RSA
# ============================================

@app.route("/")
def home():
    return jsonify({
        "service": "toyrsa",
        "e": PUBLIC_EXPONENT,
        "routes": ["/encrypt", "/decrypt", "/generate_keys_manual", "/encrypt_text", "/decrypt_text"]
    })

@app.route("/encrypt", methods=["POST"])
def encrypt():
    data = _json_body()
    message = _int_field(data, "message")

    p, q, c = Encrypt(message, verbose=False)

    return jsonify({
        "success": True,
        "p": p,
        "q": q,
        "n": p * q,
        "ciphertext": c
    })

@app.route("/decrypt", methods=["POST"])
def decrypt():
    data = _json_body()
    p = _int_field(data, "p")
    q = _int_field(data, "q")
    ciphertext = _int_field(data, "ciphertext")

    return jsonify({"success": True, "plaintext": Decrypt(p, q, ciphertext)})

# ============================================
# ROUTES - MANUAL PRIMES
# ============================================

@app.route("/generate_keys_manual", methods=["POST"])
def generate_keys_manual():
    data = _json_body()
    p = _int_field(data, "p")
    q = _int_field(data, "q")

    public_key_val, private_key_val, p_val, q_val, lam_val = rsacipherdemo.GenerateKeys(p, q)

    e_val, n_val = public_key_val
    d_val, n_val = private_key_val

    return jsonify({
        "success": True,
        "p": p_val,
        "q": q_val,
        "e": e_val,
        "n": n_val,
        "d": d_val,
        "lam": lam_val
    })

@app.route("/encrypt_text", methods=["POST"])
def encrypt_text():
    data = _json_body()
    plaintext = data.get("plaintext")
    if not isinstance(plaintext, str):
        raise ValueError("'plaintext' must be a string")
    public_key = (_int_field(data, "e"), _int_field(data, "n"))

    cipher_block = rsacipherdemo.Encrypt(plaintext, public_key)
    return jsonify({"success": True, "cipher_block": cipher_block})

@app.route("/decrypt_text", methods=["POST"])
def decrypt_text():
    data = _json_body()
    cipher_block = data.get("cipher_block")
    if not isinstance(cipher_block, list):
        raise ValueError("'cipher_block' must be a list of integers")
    cipher_block = [_as_int(c, "cipher_block") for c in cipher_block]
    private_key = (_int_field(data, "d"), _int_field(data, "n"))

    plaintext = rsacipherdemo.Decrypt(cipher_block, private_key)
    return jsonify({"success": True, "plaintext": plaintext})

if __name__ == "__main__":
    app.run(host=HOST, port=PORT, debug=DEBUG)
