"""Example: drive the list view-model directly (no Flask).

Loads the attendance list once and prints what the screen would render.
"""

import asyncio

from config import load_settings

from presensi_client.container import build_container


async def main():
    settings = load_settings()
    container = build_container(
        api_config=settings.API_CONFIG,
        token_store_path=settings.TOKEN_STORE_PATH,
        timezone=settings.TIMEZONE,
    )
    attendance = container.attendance_list
    await attendance.load()
    attendance.set_filter("today")
    for card in attendance.visible_cards():
        print(card["day"], card["time"], card["title"], card["status"])


if __name__ == "__main__":
    asyncio.run(main())
