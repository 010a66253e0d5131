# -*- coding: utf-8 -*-
"""
Read-only phrase tables shared by the normalizer, extractors and quality assessor.
"""

# UI/design vocabulary used for keywords and the terms score
DESIGN_TERMS: tuple[str, ...] = (
    "accessibility",
    "animation",
    "branding",
    "buttons",
    "color",
    "controls",
    "design",
    "feedback",
    "gestures",
    "haptics",
    "icons",
    "images",
    "input",
    "interface",
    "layout",
    "materials",
    "motion",
    "navigation",
    "presentation",
    "selection",
    "status",
    "system",
    "typography",
    "visual",
    "widgets",
    "human interface guidelines",
    "user experience",
    "user interface",
    "touch target",
    "dynamic type",
    "voiceover",
    "dark mode",
    "light mode",
)

# Phrases left behind by a scrape that never rendered the page
FALLBACK_INDICATORS: tuple[str, ...] = (
    "this page requires javascript",
    "please turn on javascript",
    "javascript is required",
    "single page application",
    "content not available",
    "loading...",
    "page not found",
    "skip navigation",
    "refresh the page to view",
)

# Navigation and changelog chrome of the single-page documentation app
SPA_INDICATORS: tuple[str, ...] = (
    "skip navigation",
    "current page is",
    "supported platforms",
    "change log",
    "platform considerations",
    "additional considerations for",
    "no additional considerations for",
)

# Any of these in long content means the page carries real guidance
SUBSTANTIAL_CONTENT_PHRASES: tuple[str, ...] = (
    "best practices",
    "guideline",
    "accessibility",
    "consider",
    "ensure",
    "avoid",
)

# Phrases that earn the guideline score
GUIDELINE_PHRASES: tuple[str, ...] = (
    "best practices",
    "guideline",
    "consider",
    "avoid",
    "should",
    "when",
)

# Terms that show up glued to their neighbours after conversion
CONCATENATION_TERMS: tuple[str, ...] = (
    "Best practices",
    "Guidelines",
    "When to use",
    "How to use",
    "iOS",
    "macOS",
    "watchOS",
    "tvOS",
    "visionOS",
    "Tab bar",
    "Navigation bar",
    "Button",
    "Picker",
    "Slider",
    "Action sheet",
    "Alert",
    "Popover",
    "Sheet",
    "Accessibility",
    "VoiceOver",
    "Dynamic Type",
    "SF Symbols",
    "App Store",
)

# Words whose internal capitals are part of the name
PROTECTED_TERMS: frozenset[str] = frozenset(
    {
        "AirDrop",
        "AirPlay",
        "AirPods",
        "AppKit",
        "ARKit",
        "CarPlay",
        "CloudKit",
        "FaceTime",
        "GameKit",
        "HealthKit",
        "HomeKit",
        "HomePod",
        "iCloud",
        "iMessage",
        "iOS",
        "iPad",
        "iPadOS",
        "iPhone",
        "iPod",
        "JavaScript",
        "MacBook",
        "macOS",
        "MapKit",
        "RealityKit",
        "SharePlay",
        "SiriKit",
        "StoreKit",
        "SwiftUI",
        "TestFlight",
        "tvOS",
        "UIKit",
        "visionOS",
        "VoiceOver",
        "watchOS",
        "WatchKit",
        "WidgetKit",
    }
)
