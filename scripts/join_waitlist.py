import argparse
import asyncio

from rapidjobs.client.waitlist_client import WaitlistClient


async def main(base_url: str, email: str, locale: str):
    client = WaitlistClient(base_url, locale=locale)
    result = await client.join(email)
    print(result.message)
    return 0 if result.ok else 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Add an email to the waitlist")
    parser.add_argument("email", help="Email address to submit")
    parser.add_argument(
        "--base-url", default="http://127.0.0.1:5000", help="Landing API base url"
    )
    parser.add_argument("--locale", default="en", choices=["en", "es"])
    args = parser.parse_args()
    raise SystemExit(asyncio.run(main(args.base_url, args.email, args.locale)))
