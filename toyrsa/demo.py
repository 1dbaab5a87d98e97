from toyrsa.errors import exit_on_fatal
from toyrsa.rsa.rsa_cipher import Decrypt, Encrypt

MESSAGE = 12345


@exit_on_fatal
def main(rng=None):
    p, q, ciphertext = Encrypt(MESSAGE, rng)

    print(f"Your encrypted message is: {ciphertext}")

    print(f"Your decrypted message is: {Decrypt(p, q, ciphertext)}")


if __name__ == "__main__":
    main()
