"""
VRChat Login

Logs in to VRChat and prints the auth cookie.
"""

import argparse
import asyncio
import getpass
import logging
import sys

from vrclogin import AuthCookie, TwoFactorType, login, login_with_code
from vrclogin.config import load_config
from vrclogin.logging_setup import setup_logging

logger = logging.getLogger("vrclogin.cli")

METHODS = [t.value for t in TwoFactorType if t is not TwoFactorType.INVALID]


def parse_args():
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description="VRChat login with two factor auth")
    parser.add_argument("--config", default="config.json", help="Config file path")
    parser.add_argument(
        "--method",
        choices=METHODS,
        default=TwoFactorType.TOTP.value,
        help="Two factor method to answer with (default: totp)",
    )
    parser.add_argument(
        "--code", help="Code for emailOtp/otp (prompted for if omitted)"
    )
    parser.add_argument(
        "--show-cookie", action="store_true", help="Print the full auth cookie"
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser.parse_args()


async def main() -> int:
    """Main entry point"""
    args = parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    config = load_config(args.config)
    two_factor_type = TwoFactorType.parse(args.method)

    if two_factor_type is TwoFactorType.TOTP:
        if not config.totp_secret:
            print("totp_secret is not set in config", file=sys.stderr)
            return 1
        result = await login(
            config.credential_data(),
            config.client_user_agent(),
            config.totp_secret,
            transport=config.transport(),
            base_url=config.api_base_url,
        )
    else:
        result = await login_with_code(
            config.credential_data(),
            config.client_user_agent(),
            two_factor_type,
            lambda: args.code or getpass.getpass(f"{two_factor_type.label} code: "),
            transport=config.transport(),
            base_url=config.api_base_url,
        )

    if isinstance(result, AuthCookie):
        logger.info(f"Logged in as {config.username}")
        print("✅ Logged in")
        print(result.value if args.show_cookie else repr(result))
        return 0

    logger.error(f"Login failed for {config.username}: {result}")
    print(f"❌ {result}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
