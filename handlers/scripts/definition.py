"""
Function-calling descriptor for the script_run tool.
"""
from config import ALT_VALUES
from lib.types import ToolDefinition

SCRIPT_RUN_TOOL: ToolDefinition = {
    "type": "function",
    "function": {
        "name": "script_run",
        "description": "Run a Google Apps Script.",
        "parameters": {
            "type": "object",
            "properties": {
                "scriptId": {
                    "type": "string",
                    "description": "The ID of the script to run.",
                },
                "fields": {
                    "type": "string",
                    "description": "Selector specifying which fields to include in a partial response.",
                },
                "alt": {
                    "type": "string",
                    "enum": list(ALT_VALUES),
                    "description": "Data format for response.",
                },
                "key": {
                    "type": "string",
                    "description": "API key for the project.",
                },
                "access_token": {
                    "type": "string",
                    "description": "OAuth access token.",
                },
                "oauth_token": {
                    "type": "string",
                    "description": "OAuth 2.0 token for the current user.",
                },
                "quotaUser": {
                    "type": "string",
                    "description": "Available to use for quota purposes for server-side applications.",
                },
                "prettyPrint": {
                    "type": "boolean",
                    "description": "Returns response with indentations and line breaks.",
                },
            },
            "required": ["scriptId"],
        },
    },
}
