from lexicon.gui.pages.script_browser import ScriptBrowserPage

__all__ = ["ScriptBrowserPage"]
