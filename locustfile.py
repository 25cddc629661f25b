from locust import HttpUser, task, between

# Fixed, valid pubkeys so every request exercises the full build path
MINT = "So11111111111111111111111111111111111111112"
WALLET_A = "9QCfNuQuxct1Xk9ytFYgxc5fThmTzL4pHQnSjjrVUrka"
WALLET_B = "7F1WzVNQ1Qpurqxxdyv3UrFQR3uoNepULVW9A4bAJ5nZ"


class InstructionApiUser(HttpUser):
    wait_time = between(1, 2)

    def on_start(self):
        # one keypair per simulated user for the sign/verify tasks
        resp = self.client.post("/keypair")
        self.keypair = resp.json()["data"]

    @task(3)
    def sign_and_verify(self):
        message = "load test message"
        signed = self.client.post(
            "/message/sign",
            json={"message": message, "secret": self.keypair["secret"]},
        ).json()["data"]
        self.client.post(
            "/message/verify",
            json={"message": message, "signature": signed["signature"], "pubkey": self.keypair["pubkey"]},
        )

    @task(2)
    def mint_token(self):
        self.client.post(
            "/token/mint",
            json={"mint": MINT, "destination": WALLET_A, "authority": WALLET_B, "amount": 1000},
        )

    @task(1)
    def send_sol(self):
        self.client.post("/send/sol", json={"from": WALLET_A, "to": WALLET_B, "lamports": 5000})
