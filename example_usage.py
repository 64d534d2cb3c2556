"""
Example usage of Story Card Smart Sizing

This script demonstrates how to use the API programmatically
"""

import requests
import json


SAMPLE_SCHEDULE = {
    "date": "Friday, March 7",
    "items": [
        {"time": "6:00 AM", "class_name": "Sunrise Spin", "instructor": "Maya", "location": "Studio B"},
        {"time": "7:30 AM", "class_name": "Power Yoga Flow", "instructor": "Jordan", "location": "Studio A"},
        {"time": "12:00 PM", "class_name": "Lunch Express HIIT", "instructor": "Sam", "location": "Main Floor"},
        {"time": "5:30 PM", "class_name": "Barbell Strength", "instructor": "Alex", "location": "Rack Room"},
        {"time": "7:00 PM", "class_name": "Restorative Stretch", "instructor": "Riley", "location": "Studio A"},
    ],
}


def smart_sizing_example():
    """
    Example: Size a story card, then re-size it with measured heights
    """
    # API endpoint
    api_url = "http://localhost:8000"

    # Check if API is running
    try:
        response = requests.get(f"{api_url}/health")
        print(f"✓ API Status: {response.json()['status']}")
    except requests.exceptions.ConnectionError:
        print("✗ Error: API is not running. Please start with: python main.py")
        return

    payload = {
        "style": {
            "heading": "Friday Schedule",
            "subtitle": "Book your spot in the app",
            "layout_style": "list",
            "spacing": "comfortable",
        },
        "visible_elements": ["className", "instructor", "time", "location"],
        "schedule": SAMPLE_SCHEDULE,
    }

    print("\nFirst pass (no measurements yet)...")
    response = requests.post(f"{api_url}/smart-sizing", json=payload)

    if response.status_code != 200:
        print(f"\n✗ Error: {response.status_code}")
        print(response.text)
        return

    result = response.json()
    print(f"  Density: {result['density']:.3f}")
    print(f"  Scale factor: {result['scale_factor']:.3f}")

    # The renderer measured 2400px of content on a 1920px canvas
    print("\nSecond pass (content overflows the canvas)...")
    payload["current_styles"] = result["element_styles"]
    payload["metrics"] = {"content_height": 2400, "available_height": 1920, "item_count": 5}
    response = requests.post(f"{api_url}/smart-sizing", json=payload)

    if response.status_code == 200:
        result = response.json()
        print(f"\n✓ Success!")
        print(json.dumps(result["spacing"], indent=2))
        for element_id, element_style in result["element_styles"].items():
            print(f"  {element_id}: {element_style['font_size']}px / {element_style['line_height']}")
    else:
        print(f"\n✗ Error: {response.status_code}")
        print(response.text)


def list_options_example():
    """
    Example: List layout and spacing options
    """
    api_url = "http://localhost:8000"

    response = requests.get(f"{api_url}/layout-options")

    if response.status_code == 200:
        options = response.json()

        print(f"\nLayouts:")
        for option in options["layout_options"]:
            print(f"  - {option['icon']} {option['label']}")
        print(f"Spacing:")
        for option in options["spacing_options"]:
            print(f"  - {option['label']}: {option['description']}")
    else:
        print(f"Error: {response.status_code}")


def direct_engine_example():
    """
    Example: Use the engine directly (without API)
    """
    from storycard import (
        MetricsTracker,
        Schedule,
        ScheduleItem,
        SmartSizingEngine,
        StoryMetrics,
        StylePreferences,
        build_initial_element_styles,
    )
    from storycard.content_elements import DEFAULT_VISIBLE_ELEMENTS

    print("\nRunning engine directly...")

    engine = SmartSizingEngine()
    schedule = Schedule(
        items=[ScheduleItem(**item) for item in SAMPLE_SCHEDULE["items"]],
        date=SAMPLE_SCHEDULE["date"],
    )

    tracker = MetricsTracker()
    preferences = StylePreferences(heading="Friday Schedule")
    styles = build_initial_element_styles()

    # Heights a renderer would report after each paint; repeats are skipped
    for measured in (1600, 1600, 2100):
        if not tracker.update(StoryMetrics(content_height=measured, available_height=1920)):
            print(f"  {measured}px: unchanged, keeping current sizes")
            continue
        result = engine.compute(
            styles,
            preferences,
            DEFAULT_VISIBLE_ELEMENTS,
            schedule=schedule,
            metrics=tracker.last,
        )
        styles = result.element_styles
        print(f"  {measured}px: re-sized, scale factor {result.scale_factor:.3f}")

    print(f"\n✓ Density: {result.density:.3f}, scale factor: {result.scale_factor:.3f}")
    for element_id, element_style in result.element_styles.items():
        print(f"  {element_id.value}: {element_style.font_size}px / {element_style.line_height}")


if __name__ == "__main__":
    import sys

    print("=" * 60)
    print("Story Card Smart Sizing - Example Usage")
    print("=" * 60)

    if len(sys.argv) > 1 and sys.argv[1] == "direct":
        # Direct engine usage
        direct_engine_example()
    else:
        # API usage
        print("\nMake sure you have started the API server: python main.py")
        print("\nPress Enter to continue...")
        input()

        smart_sizing_example()
        list_options_example()

    print("\n" + "=" * 60)
