#!/usr/bin/env python3
"""
Example: Work the demo inbox from the command line.

This script demonstrates:
1. Logging in through the auth stub and restoring the saved session
2. Listing the inbox, most recent conversation first
3. Magic Suggest, Score Lead and Summary on a conversation
4. Sending the suggested reply

Prerequisites:
    - Set environment variables:
        OPENAI_API_KEY=your_key

Usage:
    python examples/run_console_demo.py [customer_id]
"""

import asyncio
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from dotenv import load_dotenv

# Load environment variables
env_file = Path(__file__).parent.parent / '.env'
if env_file.exists():
    load_dotenv(env_file)

from sales_agent.assist import SalesAssistant
from sales_agent.auth import AuthService, SessionManager
from sales_agent.clients.openai_client import OpenAIClient
from sales_agent.config import config
from sales_agent.console import SalesConsole
from sales_agent.seed import build_demo_store, demo_business


async def main(customer_id: str) -> None:
    missing = config.validate()
    if missing:
        print(f"Missing configuration: {', '.join(missing)}")
        sys.exit(1)

    session = SessionManager(AuthService())
    user = await session.login('demo@salesagent.ai', 'password')
    print(f"Logged in as {user.name} ({user.role.value})")

    restored = await session.restore()
    print(f"Session restored: {restored is not None}")

    store = build_demo_store(config.BUSINESS_ID)
    openai = OpenAIClient()
    console = SalesConsole(
        store=store,
        assistant=SalesAssistant(openai),
        business=demo_business(config.BUSINESS_ID, config.BUSINESS_NAME),
    )

    try:
        print('\nInbox:')
        for row in store.conversation_list():
            preview = row.last_message.content if row.last_message else 'No messages yet'
            print(f"  [{row.customer.lead_status.value:>4}] {row.customer.name}: {preview}")

        customer = console.select_customer(customer_id)
        print(f"\nOpened conversation with {customer.name}")

        summary = await console.summarize(customer_id)
        print(f"Summary: {summary}")

        result = await console.score_lead(customer_id)
        print(f"Lead status: {result.status.value} ({result.reasoning})")

        reply = await console.suggest_reply(customer_id)
        print(f"Suggested reply: {reply}")

        console.send_message(reply)
        print(f"Thread now has {len(store.thread(customer_id))} messages")
    finally:
        session.logout()
        await openai.close()


if __name__ == '__main__':
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else '3'))
