"""
Pepper Picker: preference-based pepper variety recommendations and
variety-specific growing guides.
"""
