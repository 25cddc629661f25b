"""
Python client for the Solana Instruction API.

Uses the requests library. One method per endpoint; each returns the `data`
payload of a success envelope.

Usage:
    from solana_instruction_api.client import InstructionApiClient
    client = InstructionApiClient("http://localhost:3000")
    kp = client.generate_keypair()
    signed = client.sign_message("hello", kp["secret"])
"""

from __future__ import annotations

from typing import Any

import requests


class InstructionApiClientError(Exception):
    """Raised when the API returns a failure envelope or a non-JSON error."""

    def __init__(self, message: str, status_code: int | None = None, response: requests.Response | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class InstructionApiClient:
    """Client for the instruction API."""

    def __init__(self, base_url: str = "http://localhost:3000", timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = requests.Session()

    def _request(self, method: str, path: str, *, json: dict[str, Any] | None = None) -> Any:
        url = f"{self.base_url}{path}"
        resp = self._session.request(method, url, json=json, timeout=self.timeout)
        is_json = resp.headers.get("content-type", "").startswith("application/json")
        body = resp.json() if is_json else None
        if not resp.ok or not isinstance(body, dict):
            error = body.get("error", resp.text) if isinstance(body, dict) else resp.text
            raise InstructionApiClientError(
                f"API error: {error}",
                status_code=resp.status_code,
                response=resp,
            )
        if "success" in body and not body["success"]:
            raise InstructionApiClientError(
                f"API error: {body.get('error')}",
                status_code=resp.status_code,
                response=resp,
            )
        return body.get("data", body)

    def health(self) -> dict[str, str]:
        return self._request("GET", "/health")

    def generate_keypair(self) -> dict[str, str]:
        """New keypair: {pubkey, secret}."""
        return self._request("POST", "/keypair")

    def create_token(self, mint: str, mint_authority: str, decimals: int) -> dict[str, Any]:
        """InitializeMint instruction."""
        return self._request(
            "POST",
            "/token/create",
            json={"mint": mint, "mint_authority": mint_authority, "decimals": decimals},
        )

    def mint_token(self, mint: str, destination: str, authority: str, amount: int) -> dict[str, Any]:
        """MintTo instruction."""
        return self._request(
            "POST",
            "/token/mint",
            json={"mint": mint, "destination": destination, "authority": authority, "amount": amount},
        )

    def sign_message(self, message: str, secret: str) -> dict[str, str]:
        return self._request("POST", "/message/sign", json={"message": message, "secret": secret})

    def verify_message(self, message: str, signature: str, pubkey: str) -> bool:
        """Return the `valid` flag of /message/verify."""
        data = self._request(
            "POST",
            "/message/verify",
            json={"message": message, "signature": signature, "pubkey": pubkey},
        )
        return bool(data["valid"])

    def send_sol(self, from_address: str, to_address: str, lamports: int) -> dict[str, Any]:
        return self._request("POST", "/send/sol", json={"from": from_address, "to": to_address, "lamports": lamports})

    def send_token(self, destination: str, mint: str, owner: str, amount: int) -> dict[str, Any]:
        return self._request(
            "POST",
            "/send/token",
            json={"destination": destination, "mint": mint, "owner": owner, "amount": amount},
        )


if __name__ == "__main__":
    client = InstructionApiClient("http://localhost:3000")

    print("Health:", client.health())

    kp = client.generate_keypair()
    print("Pubkey:", kp["pubkey"])

    signed = client.sign_message("hello solana", kp["secret"])
    print("Signature:", signed["signature"])
    print("Valid:", client.verify_message("hello solana", signed["signature"], kp["pubkey"]))

    try:
        client.send_sol(kp["pubkey"], kp["pubkey"], 0)
    except InstructionApiClientError as e:
        print("Rejected:", e)
