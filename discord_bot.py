import os

import discord
from dotenv import load_dotenv

from corriere_news import NewsScraper, UpstreamFetchError
from corriere_news.config import get_settings
from corriere_news.logging_config import configure_logging

# Load environment variables from .env
load_dotenv()

# Bot token, stored in .env as DISCORD_BOT_TOKEN="YOUR_BOT_TOKEN"
TOKEN = os.getenv("DISCORD_BOT_TOKEN")

if not TOKEN:
    raise ValueError("DISCORD_BOT_TOKEN is not set. Check your .env file.")

intents = discord.Intents.default()
intents.message_content = True  # needed to read commands

client = discord.Client(intents=intents)

settings = get_settings()
configure_logging(settings)

# Compiled once; a bad selector stops the bot before it logs in
scraper = NewsScraper(
    url=settings.source_url,
    origin=settings.site_origin,
    limit=5,
    timeout=settings.request_timeout,
)


def format_news(items) -> str:
    response = f"📰 Corriere della Sera: top {len(items)}\n\n"
    for item in items:
        response += f"**{item.title}**\n"
        if item.description:
            response += f"*{item.description}*\n"
        response += f"<{item.link}>\n\n"

    # Discord rejects messages over 2000 characters
    if len(response) > 2000:
        response = response[:1997] + "..."
    return response


@client.event
async def on_ready():
    print(f"Logged in as {client.user}")


@client.event
async def on_message(message):
    # Ignore our own messages
    if message.author == client.user:
        return

    if message.content.startswith('!news'):
        await message.channel.send("Fetching the latest headlines...")

        try:
            news_items = await scraper.fetch_items()
        except UpstreamFetchError as e:
            print(f"News fetch error: {e}")
            await message.channel.send("Could not reach corriere.it, try again later.")
            return

        if not news_items:
            await message.channel.send("No headlines found.")
            return

        await message.channel.send(format_news(news_items))


if __name__ == "__main__":
    client.run(TOKEN)
