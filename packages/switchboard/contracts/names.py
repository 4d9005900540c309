from __future__ import annotations

from typing import Final

from .events import COMPONENT_CREATED, COMPONENT_DESTROYED


class Events:
    """
    Conventional event names, grouped by domain prefix.
    The bus treats them as opaque keys, this is only a shared vocabulary.
    """

    # application
    APPLICATION_READY: Final = "application:ready"
    APPLICATION_ERROR: Final = "application:error"
    APPLICATION_SHUTDOWN_STARTED: Final = "application:shutdownStarted"
    APPLICATION_HIDDEN: Final = "application:hidden"
    APPLICATION_VISIBLE: Final = "application:visible"
    NETWORK_STATE_CHANGED: Final = "application:networkStateChanged"
    COMPONENT_ERROR: Final = "application:componentError"
    USER_IDLE: Final = "application:userIdle"
    USER_ACTIVE: Final = "application:userActive"
    KEYBOARD_SHORTCUT: Final = "application:keyboardShortcut"

    # component lifecycle (published by ComponentFactory)
    COMPONENT_CREATED: Final = COMPONENT_CREATED
    COMPONENT_DESTROYED: Final = COMPONENT_DESTROYED

    # document
    DOCUMENT_CHANGED: Final = "document:changed"
    DOCUMENT_SAVED: Final = "document:saved"
    DOCUMENT_LOADED: Final = "document:loaded"
    DOCUMENT_NEW: Final = "document:new"
    DOCUMENT_STATS_UPDATED: Final = "document:statsUpdated"

    # file
    FILE_OPENED: Final = "file:opened"
    FILE_SAVED: Final = "file:saved"
    FILE_SAVED_SUCCESSFULLY: Final = "file:savedSuccessfully"
    FILE_SAVE_AS: Final = "file:saveAs"
    FILE_ERROR: Final = "file:error"
    FILE_DROP: Final = "file:drop"
    FILE_NEW_CREATED: Final = "file:newCreated"
    FILE_OPEN_REQUEST: Final = "file:openRequest"
    FILE_SAVE_REQUEST: Final = "file:saveRequest"
    FILE_SAVE_AS_REQUEST: Final = "file:saveAsRequest"
    FILE_NEW_REQUEST: Final = "file:newRequest"
    FILE_LOAD_REQUEST: Final = "file:loadRequest"
    FILE_VALIDATION_FAILED: Final = "file:validationFailed"
    AUTO_SAVE_REQUEST: Final = "file:autoSaveRequest"
    RECENT_FILE_REQUEST: Final = "file:recentFileRequest"
    RECENT_FILES_LOADED: Final = "file:recentFilesLoaded"
    FILE_CONTROLLER_READY: Final = "file:controllerReady"

    # file dialog
    FILE_DIALOG_OPENING: Final = "fileDialog:opening"
    FILE_DIALOG_SUCCESS: Final = "fileDialog:success"
    FILE_DIALOG_CANCELLED: Final = "fileDialog:cancelled"

    # editor
    EDITOR_READY: Final = "editor:ready"
    EDITOR_CONTENT_CHANGED: Final = "editor:contentChanged"
    EDITOR_SELECTION_CHANGED: Final = "editor:selectionChanged"
    EDITOR_MODE_CHANGED: Final = "editor:modeChanged"
    EDITOR_SETTINGS_LOADED: Final = "editor:settingsLoaded"
    EDITOR_UNDO: Final = "editor:undo"
    EDITOR_REDO: Final = "editor:redo"
    EDITOR_UNDO_EXECUTED: Final = "editor:undoExecuted"
    EDITOR_REDO_EXECUTED: Final = "editor:redoExecuted"
    EDITOR_COMMAND: Final = "editor:command"

    # ui
    UI_DIALOG_OPEN: Final = "ui:dialogOpen"
    UI_DIALOG_CLOSE: Final = "ui:dialogClose"
    UI_NOTIFICATION: Final = "ui:notification"

    # settings
    SETTINGS_CHANGED: Final = "settings:changed"
    SETTINGS_LOADED: Final = "settings:loaded"

    # ai
    AI_CONTROLLER_READY: Final = "ai:controllerReady"
    AI_PROCESS_REQUEST: Final = "ai:processRequest"
    AI_PROCESS_COMPLETED: Final = "ai:processCompleted"
    AI_PROCESS_FAILED: Final = "ai:processFailed"
    AI_TRANSLATE_REQUEST: Final = "ai:translateRequest"
    AI_SUMMARIZE_REQUEST: Final = "ai:summarizeRequest"
    AI_IMPROVE_REQUEST: Final = "ai:improveRequest"
    AI_CONTINUE_REQUEST: Final = "ai:continueRequest"
    AI_CUSTOM_REQUEST: Final = "ai:customRequest"
    AI_SETTINGS_UPDATE: Final = "ai:settingsUpdate"
    AI_SETTINGS_LOADED: Final = "ai:settingsLoaded"
    AI_SETTINGS_UPDATED: Final = "ai:settingsUpdated"
    AI_BUTTON_CLICKED: Final = "ai:buttonClicked"
    AI_PROMPT_SUBMITTED: Final = "ai:promptSubmitted"
    AI_PROCESSING_STATE_CHANGED: Final = "ai:processingStateChanged"
    AI_REQUEST_START: Final = "ai:requestStart"
    AI_REQUEST_END: Final = "ai:requestEnd"
    AI_ERROR: Final = "ai:error"


class Services:
    """Well-known service names used at the composition root."""

    EVENT_BUS: Final = "eventBus"
    STORAGE_SERVICE: Final = "storageService"
    FILE_SYSTEM_SERVICE: Final = "fileSystemService"
    AI_SERVICE: Final = "aiService"
    DOCUMENT_MODEL: Final = "documentModel"
    FILE_MODEL: Final = "fileModel"
    SETTINGS_MODEL: Final = "settingsModel"
    EDITOR_CONTROLLER: Final = "editorController"
    FILE_CONTROLLER: Final = "fileController"
    AI_CONTROLLER: Final = "aiController"
    EDITOR_VIEW: Final = "editorView"
    TOOLBAR_VIEW: Final = "toolbarView"
    DIALOG_VIEW: Final = "dialogView"


class Components:
    EDITOR_VIEW: Final = "editorView"
    TOOLBAR_VIEW: Final = "toolbarView"
    STATUS_BAR_VIEW: Final = "statusBarView"
    DIALOG_VIEW: Final = "dialogView"
    SETTINGS_VIEW: Final = "settingsView"
    SAVE_DIALOG: Final = "saveDialog"
    OPEN_DIALOG: Final = "openDialog"
    AI_PANEL: Final = "aiPanel"
    CHAT_PANEL: Final = "chatPanel"
    VERSION_PANEL: Final = "versionPanel"
