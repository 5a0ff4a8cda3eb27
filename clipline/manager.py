import asyncio
from . import copy_text, paste_text


class ClipboardManager:
    """Run the blocking clipboard calls off the event loop."""

    def __init__(self, copier=copy_text, paster=paste_text):
        self._copier = copier
        self._paster = paster

    async def paste(self):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._paster)

    async def copy(self, text):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._copier, text)
