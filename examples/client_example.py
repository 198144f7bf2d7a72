"""
Client Examples for the fiskaly SDK
Demonstrates bootstrapping a session and proxying requests
"""

import logging

from fiskaly_sdk import (
    ConfigLoader,
    ConfigParams,
    FiskalyClient,
    FiskalyError,
    ServiceError,
    TransportTimeoutError,
)


# =============================================================================
# Example 1: Credentials from the environment
# =============================================================================

def credentials_example() -> FiskalyClient:
    """Create a session from FISKALY_* environment variables"""
    settings = ConfigLoader().load()
    return FiskalyClient.from_settings(settings)


# =============================================================================
# Example 2: Configure the service and proxy a request
# =============================================================================

def request_example(client: FiskalyClient) -> None:
    print("Version:", client.get_version())
    print("Config before update:", client.get_config())

    config = client.configure(ConfigParams(
        debug_level=4,
        debug_file="./fiskaly.log",
        client_timeout=5000,
        smaers_timeout=2000,
    ))
    print("Config after update:", config)

    try:
        response = client.request(
            "PUT",
            "/tss/ecb75169-680f-48d1-93b2-52cc10abb9f/tx/9cbe6566-e24c-42ac-97fe-6a0112fb3c6",
            query={"last_revision": "0"},
            headers={"Content-Type": "application/json"},
            body="eyJzdGF0ZSI6ICJBQ1RJVkUiLCJjbGllbnRfaWQiOiAiYTYyNzgwYjAtMTFiYi00MThhLTk3MzYtZjQ3Y2E5NzVlNTE1In0=",
        )
        print("Request response:", response.status)
    except TransportTimeoutError:
        print("fiskaly service did not answer in time")
    except ServiceError as e:
        print("Request rejected:", e.get_description())


# =============================================================================
# Example 3: Resume a session
# =============================================================================

def resume_example(fiskaly_service: str, context: str) -> FiskalyClient:
    """Resume a session without contacting the service"""
    return FiskalyClient.create_using_context(fiskaly_service, context)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    try:
        with credentials_example() as client:
            request_example(client)
            resumed = resume_example(client.transport.url, client.get_context())
            print("Resumed context matches:", resumed.get_context() == client.get_context())
            resumed.close()
    except FiskalyError as e:
        print(f"Error: {e.get_description()}")
