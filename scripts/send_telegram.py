#!/usr/bin/env python3
"""
Live check for telegram_sender against the real Bot API.

Before running:
1. Set environment variables:
   export TELEGRAM_BOT_TOKEN="your_bot_token_here"
   export TELEGRAM_CHAT_ID="@your_channel_or_chat_id"

2. Or pass them directly to the script:
   python send_telegram.py --token YOUR_TOKEN --chat-id @mychannel --photo /path/to/image.jpg
"""

import argparse
from loguru import logger
import os
import sys
from telegram_sender import BotClient, TelegramError
import traceback


def main():
    parser = argparse.ArgumentParser(description='Send test messages and files to a Telegram chat')
    parser.add_argument('--token', help='Bot token (or set TELEGRAM_BOT_TOKEN env var)')
    parser.add_argument('--chat-id', help='Chat ID (or set TELEGRAM_CHAT_ID env var)')
    parser.add_argument('--text', default='🚀 Hello from telegram_sender!', help='Message text')
    parser.add_argument('--document', help='Path to a document to send (optional)')
    parser.add_argument('--photo', help='Path to a photo to send (optional)')
    parser.add_argument('--video', help='Path to a video to send (optional)')
    parser.add_argument('--caption', default='', help='Caption for files')
    args = parser.parse_args()

    token = args.token or os.getenv("TELEGRAM_BOT_TOKEN")
    chat_id = args.chat_id or os.getenv("TELEGRAM_CHAT_ID")

    try:
        if not chat_id:
            raise ValueError("Missing chat id")

        logger.info("🤖 Creating Telegram client...")
        failures = 0
        with BotClient(token) as bot:
            logger.info("📤 Sending text message...")
            if bot.send_message(chat_id, args.text):
                logger.info("✅ Message sent")
            else:
                logger.warning("⚠️  Telegram rejected the message")
                failures += 1

            senders = [
                (args.document, bot.send_document, "document"),
                (args.photo, bot.send_photo, "photo"),
                (args.video, bot.send_video, "video"),
            ]
            for path, send, label in senders:
                if not path:
                    continue
                logger.info(f"📤 Sending {label} from: {path}")
                if send(chat_id, path, caption=args.caption):
                    logger.info(f"✅ {label.capitalize()} sent")
                else:
                    logger.warning(f"⚠️  Telegram rejected the {label}")
                    failures += 1

        if failures:
            sys.exit(1)
        logger.info("\n🎉 Everything was delivered.")

    except ValueError as e:
        logger.error(f"❌ Configuration error: {e}")
        logger.info("\nMake sure to:")
        logger.info("1. Set TELEGRAM_BOT_TOKEN environment variable")
        logger.info("2. Set TELEGRAM_CHAT_ID environment variable")
        logger.info("3. Or pass --token and --chat-id arguments")
        sys.exit(1)

    except FileNotFoundError as e:
        logger.error(f"❌ File not found: {e}")
        sys.exit(1)

    except TelegramError as e:
        logger.error(f"❌ {type(e).__name__}: {e}")
        logger.debug(traceback.format_exc())
        sys.exit(1)


if __name__ == "__main__":
    main()
