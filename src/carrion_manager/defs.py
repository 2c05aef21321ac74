"""
Filename:   defs.py
Author:     jole
Created:    02.10.2025

Description:    Hold various constants, or other definitions, for use across the project.

Notes:
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import argparse
# --- END OF Import section --------------------------------------------------------------------------------------------



ARGUMENT_DESCRIPTION = "Carrion Map Manager, a terminal map installer and map info editor for Carrion"

ARGUMENT_EPILOG =   ("Controls:\n"
                     "  Arrow keys / PgUp / PgDn : Navigate\n"
                     "  Enter / Space            : Confirm\n"
                     "  Esc                      : Back (quits from the navigation window)\n"
                     "  1 / 2 / 3                : Navigation / Map Installer / Map Editor\n"
                     "  4 / 5                    : Save File Manager / Backups\n"
                     "  Alt+Enter                : New line in the long description editor\n"
                     "\nCLI:\n"
                    )

ARGUMENT_FORMATTER_CLASS = argparse.RawDescriptionHelpFormatter

DEFAULT_LOG_FILE        = "carrion_manager.log"
DEFAULT_REGISTRY_FILE   = "installed.json"
BACKUP_FOLDER_NAME      = "Backups"
TEMPLATES_FOLDER_NAME   = "Templates"

# --- Game folders and files
LEVEL_FOLDER_NAME       = "Levels"
LEVEL_FILE_EXTENSION    = ".json"
SCRIPT_FOLDER_NAME      = "Scripts"
SCRIPT_FILE_EXTENSION   = ".cgs"
CONTENT_FOLDER_NAME     = "Content"
MAP_INFO_FILE_NAME      = "MapInfo.txt"
MAX_SUBFOLDER_DEPTH     = 10    # how deep below the custom maps folder we look for map folders
EMPTY_LEVEL_TEMPLATE    = "EmptyLevel.json"
EMPTY_SCRIPT_TEMPLATE   = "EmptyScript.cgs"
EXPORT_TIMESTAMP_FORMAT = "_%Y-%m-%d_%H-%M-%S-%f"

# --- Save files and backups
SAVE_FOLDER_NAME            = "Saves"
SAVE_FILE_EXTENSION         = ".crn"
SAVE_INFO_FILE_NAME         = "SaveInfo.txt"
SAVE_INFO_KEY_MAP_NAME      = "MapName"
SAVES_BACKUP_FOLDER_NAME    = "Saves"
BACKUP_SETTINGS_FILE_NAME   = "BackupSettings.txt"
BACKUP_SETTINGS_KEY_MANAGE  = "ManageSaves"
SAVE_BACKUP_TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"

# --- Keys in MapInfo.txt
MAP_INFO_KEY_NAME               = "MapName"
MAP_INFO_KEY_AUTHOR             = "Author"
MAP_INFO_KEY_VERSION            = "Version"
MAP_INFO_KEY_SHORT_DESCRIPTION  = "ShortDescription"
MAP_INFO_KEY_LONG_DESCRIPTION   = "LongDescription"
MAP_INFO_KEY_STARTUP_LEVEL      = "StartupLevel"
MAP_INFO_KEY_IS_WIP             = "IsWIP"

# --- Terminal size we lay the windows out for
MIN_TERMINAL_WIDTH      = 80
MIN_TERMINAL_HEIGHT     = 13

# --- Selection markers, (left, right)
SELECTED_SYMBOLS        = ("[", "]")
HIGHLIGHTED_SYMBOLS     = ("[", "]")
UNSELECTED_SYMBOLS      = (" ", " ")

CONTROLS_TEXT = "Arrows/PgUp/PgDn: Navigate    Enter/Space: Confirm    Esc: Back    1-5: Switch window"

# --- UI strings
TEXT_CANCEL             = "Cancel"
TEXT_INSTALL            = "Install"
TEXT_UNINSTALL          = "Uninstall"
TEXT_REINSTALL          = "Reinstall"
TEXT_OVERWRITE          = "Overwrite"
TEXT_SHOW_ISSUES        = "Show Issues"
TEXT_EDIT_MAP_INFO      = "Edit Map Info"
TEXT_SHOW_ONLY_WIP      = "Show only WIP maps"
TEXT_BACKUP_AND_INSTALL = "Backup & Install"
TEXT_EDIT_LEVELS        = "Edit Levels"
TEXT_EXPORT             = "Export"
TEXT_EXPORT_TIMESTAMPED = "Export with Timestamp"
TEXT_RENAME             = "Rename"
TEXT_DELETE             = "Delete"
TEXT_ADD_MAP            = "Add new map..."
TEXT_ADD_LEVEL          = "Add new level..."
TEXT_ASSIGN_LEVELS      = "Assign existing levels..."
TEXT_MAP_NAME           = "Map name"
TEXT_LEVEL_NAME         = "Level name"
TEXT_LOAD_BACKUP        = "Load Backup"
TEXT_BACK_UP_SAVE       = "Backup current save"
TEXT_VIEW_BACKUPS       = "View backups..."
TEXT_TOGGLE_AUTO_BACKUP = "Toggle Auto-Backups"
TEXT_BACKED_UP_LEVELS   = "Backed up Levels"
TEXT_BACKED_UP_SCRIPTS  = "Backed up Scripts"
TEXT_MAIN_GAME          = "Main Game"
TEXT_UNKNOWN            = "Unknown"
TEXT_ENABLED            = "Enabled"
TEXT_DISABLED           = "Disabled"

MAP_HAS_ISSUES_INDICATOR = "[!] "

NAVIGATION_WINDOW_TITLE     = "Window Navigator"
NAVIGATION_LIST_HEADER      = "Windows"
MAP_INSTALLER_WINDOW_TITLE  = "Map Installer"
MAP_EDITOR_WINDOW_TITLE     = "Map Editor"
SAVE_MANAGER_WINDOW_TITLE   = "Save File Manager"
BACKUPS_WINDOW_TITLE        = "Backups"
INSTALLED_MAPS_HEADER       = "Installed Maps"
AVAILABLE_MAPS_HEADER       = "Available Custom Maps"
MAP_DETAILS_HEADER          = "Map Details"
COMMANDS_HEADER             = "Commands"
SAVE_DETAILS_HEADER         = "Save Details"
BACKUP_DETAILS_HEADER       = "Backup Details"
LEVELS_HEADER               = "Levels"

MAP_INFO_NAME               = "Map: "
MAP_INFO_AUTHOR             = "Author: "
MAP_INFO_NO_AUTHOR          = "Unknown"
MAP_INFO_VERSION            = "Version: "
MAP_INFO_NO_VERSION         = "-"
MAP_INFO_SHORT_DESCRIPTION  = "Description: "
MAP_INFO_LONG_DESCRIPTION   = "Long Description:"
MAP_INFO_STARTUP_LEVEL      = "Startup Level: "
MAP_INFO_NO_STARTUP_LEVEL   = "-not set-"
MAP_INFO_IS_WIP             = "Work in progress: "
MAP_INFO_SEPARATOR          = " | "

MULTILINE_EDITOR_HINT       = ["Press Alt+Enter to go to the next line.",
                               "Enter saves the description, Esc discards the changes."]

SAVE_SUMMARY_CURRENT_SAVE   = "Current saved map:"
SAVE_SUMMARY_BACKUPS_COUNT  = "Number of backups:"
SAVE_SUMMARY_AUTO_BACKUP    = "Auto-backup & -load saves:"
LEVEL_BACKUPS_COUNT         = "Number of backed up levels:"
SCRIPT_BACKUPS_COUNT        = "Number of backed up scripts:"
