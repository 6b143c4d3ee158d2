"""Simple localization helper for the Background Remover client."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List

DEFAULT_LANGUAGE = "ar"

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "en": {
        "app.title": "AI Background Remover",
        "app.subtitle": "Remove image backgrounds with AI",
        "control.reset": "Reset",
        "control.language": "Language",
        "control.choose": "Choose Image",
        "control.submit": "Remove Background",
        "control.download": "Download Image",
        "control.new_image": "New Image",
        "upload.title": "Drag and drop your image here",
        "upload.hint": "or click to choose a file from your device",
        "upload.formats": "Supports: JPG, PNG, JPEG, GIF, BMP, WEBP (up to 10MB)",
        "preview.original": "Original Image",
        "preview.processed": "Background Removed",
        "progress.processing": "Processing the image with AI...",
        "progress.phase_analyzing": "Analyzing image...",
        "progress.phase_detecting": "Detecting objects...",
        "progress.phase_removing": "Removing background...",
        "progress.phase_finishing": "Final touches...",
        "dialog.select_image": "Select Image",
        "dialog.image_files": "Image files",
        "dialog.all_files": "All files",
        "dialog.save_result": "Save Image",
        "dialog.saved_title": "Image Saved",
        "dialog.saved_message": "Saved to:\n{path}",
        "dialog.error_title": "Error",
        "dialog.save_error": "Could not save the image: {error}",
        "error.file_too_large": "File is too large. Maximum size is 10MB",
        "error.invalid_type": "Please choose a valid image file",
        "error.unreadable": "Could not read the selected file",
        "error.processing": "An error occurred while processing the image",
        "error.processing_failed": "Failed to process the image",
        "status.ready": "Ready",
        "status.processing": "Status: Processing",
        "status.completed": "Status: Completed",
        "lang.en": "English",
        "lang.ar": "Arabic",
    },
    "ar": {
        "app.title": "AI Background Remover",
        "app.subtitle": "إزالة الخلفية بالذكاء الاصطناعي",
        "control.reset": "إعادة تعيين",
        "control.language": "اللغة",
        "control.choose": "اختيار صورة",
        "control.submit": "إزالة الخلفية بالذكاء الاصطناعي",
        "control.download": "تحميل الصورة",
        "control.new_image": "صورة جديدة",
        "upload.title": "اسحب وأفلت صورتك هنا",
        "upload.hint": "أو انقر لاختيار ملف من جهازك",
        "upload.formats": "يدعم: JPG, PNG, JPEG, GIF, BMP, WEBP (حتى 10MB)",
        "preview.original": "الصورة الأصلية",
        "preview.processed": "بعد إزالة الخلفية",
        "progress.processing": "جاري معالجة الصورة بالذكاء الاصطناعي...",
        "progress.phase_analyzing": "تحليل الصورة...",
        "progress.phase_detecting": "تحديد الكائنات...",
        "progress.phase_removing": "إزالة الخلفية...",
        "progress.phase_finishing": "اللمسات الأخيرة...",
        "dialog.select_image": "اختيار صورة",
        "dialog.image_files": "ملفات الصور",
        "dialog.all_files": "كل الملفات",
        "dialog.save_result": "حفظ الصورة",
        "dialog.saved_title": "تم حفظ الصورة",
        "dialog.saved_message": "تم الحفظ في:\n{path}",
        "dialog.error_title": "خطأ",
        "dialog.save_error": "تعذر حفظ الصورة: {error}",
        "error.file_too_large": "حجم الملف كبير جداً. الحد الأقصى 10MB",
        "error.invalid_type": "يرجى اختيار ملف صورة صالح",
        "error.unreadable": "تعذرت قراءة الملف المحدد",
        "error.processing": "حدث خطأ أثناء معالجة الصورة",
        "error.processing_failed": "فشل في معالجة الصورة",
        "status.ready": "جاهز",
        "status.processing": "الحالة: جاري المعالجة",
        "status.completed": "الحالة: اكتملت المعالجة",
        "lang.en": "الإنجليزية",
        "lang.ar": "العربية",
    },
}


def _fallback_text(key: str) -> str:
    return TRANSLATIONS["en"].get(key, key)


@dataclass
class Translator:
    """Simple observer-based translator."""

    language: str = DEFAULT_LANGUAGE
    _listeners: List[Callable[[], None]] = field(default_factory=list)

    def translate(self, key: str, **kwargs) -> str:
        bundle = TRANSLATIONS.get(self.language, TRANSLATIONS["en"])
        template = bundle.get(key, _fallback_text(key))
        return template.format(**kwargs)

    def set_language(self, language: str, *, notify: bool = True):
        if language not in TRANSLATIONS:
            language = DEFAULT_LANGUAGE
        if language == self.language:
            return
        self.language = language
        if notify:
            for listener in list(self._listeners):
                listener()

    def register(self, callback: Callable[[], None]):
        self._listeners.append(callback)

    def available_languages(self) -> List[str]:
        return list(TRANSLATIONS.keys())

    def language_name(self, code: str) -> str:
        bundle = TRANSLATIONS.get(self.language, TRANSLATIONS["en"])
        fallback = TRANSLATIONS["en"]
        return bundle.get(f"lang.{code}", fallback.get(f"lang.{code}", code))


_translator = Translator()


def get_translator() -> Translator:
    """Return global translator singleton."""
    return _translator
