"""Localized strings for the wizard, the CLI and the results report.

Every locale carries the same keys; get_strings() falls back to English.
"""

from bodyfat_estimator.config import DEFAULT_LOCALE
from bodyfat_estimator.units import format_for_input

STRINGS = {
    "en": {
        "language_name": "English",
        "app_title": "Body Fat Estimator",
        "welcome_title": "Welcome!",
        "welcome_text": "Let's estimate your body fat percentage.",
        "start_button": "Start",
        "next_button": "Next",
        "back_button": "Back",
        "calculate_button": "Calculate",
        "reset_button": "Start Over",
        "metric": "Metric (kg/cm)",
        "imperial": "Imperial (lbs/ft/in)",
        "sex_title": "Select Your Biological Sex",
        "sexes": {"male": "Male", "female": "Female"},
        "age_title": "What is your Age?",
        "age_label": "Age (years)",
        "weight_title": "Enter Your Weight",
        "weight_label": "Weight ({unit})",
        "height_title": "Enter Your Height",
        "height_cm_label": "Height (cm)",
        "height_ft_label": "Feet",
        "height_in_label": "Inches",
        "circumference_title": "Enter {field} Circumference",
        "circumference_label": "Circumference ({unit})",
        "field_names": {"neck": "Neck", "waist": "Waist", "hip": "Hip"},
        "measure_hints": {
            "neck": "Measure just below the larynx, tape sloping slightly downward to the front.",
            "waist": "Men: at the navel. Women: at the narrowest point of the abdomen.",
            "hip": "Measure around the widest part of the buttocks.",
        },
        "field_labels": {
            "age": "Age",
            "weight": "Weight",
            "height_cm": "Height",
            "height_ft": "Feet",
            "height_in": "Inches",
            "neck": "Neck",
            "waist": "Waist",
            "hip": "Hip",
        },
        "height_flags": {
            "metric": "Use --height with metric units, not --feet/--inches.",
            "imperial": "Use --feet and --inches with imperial units, not --height.",
        },
        "required": {
            "sex": "Please select a gender.",
            "age": "Age is required.",
            "weight": "Weight is required.",
            "height_cm": "Height is required.",
            "height_ft": "Feet required.",
            "height_in": "Inches required.",
            "neck": "Neck is required.",
            "waist": "Waist is required.",
            "hip": "Hip is required.",
        },
        "errors": {
            "invalid_number": "Invalid number",
            "out_of_range": "Range: {min}-{max}",
        },
        "loading_messages": [
            "Analyzing inputs...", "Applying formulas...", "Calculating BMI...",
            "Estimating Navy BF%...", "Computing RFM...", "Running CUN-BAE...",
            "Processing ECORE-BF...", "Cross-referencing data...", "Calibrating estimates...",
            "Compiling results...", "Generating chart...", "Building your report...",
            "Almost there...", "Finalizing...",
        ],
        "results_title": "Results",
        "disclaimer": (
            "Disclaimer: These are estimations based on formulas and may differ from "
            "clinical measurements (e.g., DXA, BodPod). Use them as a general guide."
        ),
        "calculation_error": "Calculation Error. Please start over.",
        "bmi_label": "BMI",
        "average_label": "Average BF%",
        "category_label": "Category",
        "chart_title": "Body Fat Estimates by Method",
        "chart_y_axis": "Body Fat (%)",
        "method_column": "Method",
        "value_column": "BF%",
        "note_column": "Note",
        "coaching_cta": "Want a plan to bring these numbers down? Reach out for personal coaching.",
        "categories": {
            "contest_prep": "Contest Prep",
            "athletic": "Athletic",
            "average": "Average",
            "overweight": "Overweight",
            "obese": "Obese",
            "unknown": "Unknown",
        },
        "category_messages": {
            "contest_prep": (
                "You are extremely lean, typical for contest preparation. "
                "Ensure adequate recovery and nutrition."
            ),
            "athletic": (
                "You're in the athletic range. Excellent work! Focus on performance goals "
                "and maintaining this healthy composition."
            ),
            "average": (
                "You're in the average range. Optimizing nutrition and training could "
                "enhance health, performance, and aesthetics."
            ),
            "overweight": (
                "Your category is Overweight. Focusing on fat loss through a sustainable "
                "calorie deficit and consistent training is recommended for significant "
                "health benefits."
            ),
            "obese": (
                "Your category is Obese. Prioritizing fat loss with professional guidance "
                "is crucial for improving long-term health and reducing risks."
            ),
        },
        "methods_title": "Estimation Methods",
        "abbreviations_title": "Abbreviations",
        "methods": {
            "bmi_based": {
                "name": "BMI-Based BF% (Deurenberg)",
                "note": "Uses BMI, Age, Sex. Less accurate for athletes.",
            },
            "navy": {
                "name": "US Navy BF% (Tape)",
                "note": "Uses Height, Neck, Waist (& Hip for women). Often inaccurate.",
            },
            "relative_fat_mass": {
                "name": "RFM BF% (Tape)",
                "note": "Uses Height & Waist. Simpler tape method.",
            },
            "cun_bae": {
                "name": "CUN-BAE BF%",
                "note": "Uses BMI, Age, Sex (M=0, F=1). Complex formula.",
            },
            "ecore": {
                "name": "ECORE-BF BF%",
                "note": "Uses Age, Sex (M=0, F=1), Ln(BMI).",
            },
        },
        "abbreviations": [
            ("BF%", "Body Fat Percentage"),
            ("BMI", "Body Mass Index"),
            ("RFM", "Relative Fat Mass"),
            ("CUN-BAE", "Navarra Estimator"),
            ("ECORE", "ECORE Estimator"),
            ("kg/cm", "Metric Units"),
            ("lbs/ft/in", "Imperial Units"),
        ],
    },
    "tr": {
        "language_name": "Türkçe",
        "app_title": "Vücut Yağ Oranı Hesaplayıcı",
        "welcome_title": "Hoş geldiniz!",
        "welcome_text": "Haydi vücut yağ oranınızı tahmin edelim.",
        "start_button": "Başla",
        "next_button": "İleri",
        "back_button": "Geri",
        "calculate_button": "Hesapla",
        "reset_button": "Baştan Başla",
        "metric": "Metrik (kg/cm)",
        "imperial": "İngiliz (lbs/ft/in)",
        "sex_title": "Biyolojik Cinsiyetinizi Seçin",
        "sexes": {"male": "Erkek", "female": "Kadın"},
        "age_title": "Kaç yaşındasınız?",
        "age_label": "Yaş (yıl)",
        "weight_title": "Kilonuzu Girin",
        "weight_label": "Kilo ({unit})",
        "height_title": "Boyunuzu Girin",
        "height_cm_label": "Boy (cm)",
        "height_ft_label": "Fit",
        "height_in_label": "İnç",
        "circumference_title": "{field} Çevresini Girin",
        "circumference_label": "Çevre ({unit})",
        "field_names": {"neck": "Boyun", "waist": "Bel", "hip": "Kalça"},
        "measure_hints": {
            "neck": "Gırtlağın hemen altından, mezura öne doğru hafif eğimli olacak şekilde ölçün.",
            "waist": "Erkekler: göbek hizasından. Kadınlar: karnın en dar noktasından.",
            "hip": "Kalçanın en geniş kısmının çevresini ölçün.",
        },
        "field_labels": {
            "age": "Yaş",
            "weight": "Kilo",
            "height_cm": "Boy",
            "height_ft": "Fit",
            "height_in": "İnç",
            "neck": "Boyun",
            "waist": "Bel",
            "hip": "Kalça",
        },
        "height_flags": {
            "metric": "Metrik birimlerde --feet/--inches yerine --height kullanın.",
            "imperial": "İngiliz birimlerinde --height yerine --feet ve --inches kullanın.",
        },
        "required": {
            "sex": "Lütfen bir cinsiyet seçin.",
            "age": "Yaş gereklidir.",
            "weight": "Kilo gereklidir.",
            "height_cm": "Boy gereklidir.",
            "height_ft": "Fit gereklidir.",
            "height_in": "İnç gereklidir.",
            "neck": "Boyun ölçüsü gereklidir.",
            "waist": "Bel ölçüsü gereklidir.",
            "hip": "Kalça ölçüsü gereklidir.",
        },
        "errors": {
            "invalid_number": "Geçersiz sayı",
            "out_of_range": "Aralık: {min}-{max}",
        },
        "loading_messages": [
            "Veriler analiz ediliyor...", "Formüller uygulanıyor...", "BMI hesaplanıyor...",
            "Navy YO% tahmin ediliyor...", "RFM hesaplanıyor...", "CUN-BAE çalıştırılıyor...",
            "ECORE-BF işleniyor...", "Veriler karşılaştırılıyor...", "Tahminler ayarlanıyor...",
            "Sonuçlar derleniyor...", "Grafik oluşturuluyor...", "Raporunuz hazırlanıyor...",
            "Neredeyse bitti...", "Son rötuşlar...",
        ],
        "results_title": "Sonuçlar",
        "disclaimer": (
            "Uyarı: Bunlar formüllere dayalı tahminlerdir ve klinik ölçümlerden "
            "(ör. DXA, BodPod) farklı olabilir. Genel bir rehber olarak kullanın."
        ),
        "calculation_error": "Hesaplama Hatası. Lütfen baştan başlayın.",
        "bmi_label": "BMI",
        "average_label": "Ortalama YO%",
        "category_label": "Kategori",
        "chart_title": "Yönteme Göre Vücut Yağ Tahminleri",
        "chart_y_axis": "Vücut Yağı (%)",
        "method_column": "Yöntem",
        "value_column": "YO%",
        "note_column": "Not",
        "coaching_cta": "Bu değerleri düşürmek için bir plan ister misiniz? Kişisel koçluk için bize ulaşın.",
        "categories": {
            "contest_prep": "Yarışma Hazırlığı",
            "athletic": "Atletik",
            "average": "Ortalama",
            "overweight": "Fazla Kilolu",
            "obese": "Obez",
            "unknown": "Bilinmiyor",
        },
        "category_messages": {
            "contest_prep": (
                "Yarışma hazırlığına özgü, son derece düşük bir yağ oranındasınız. "
                "Yeterli dinlenme ve beslenmeye dikkat edin."
            ),
            "athletic": (
                "Atletik aralıktasınız. Harika iş! Performans hedeflerinize ve bu sağlıklı "
                "vücut kompozisyonunu korumaya odaklanın."
            ),
            "average": (
                "Ortalama aralıktasınız. Beslenme ve antrenmanı iyileştirmek sağlığınızı, "
                "performansınızı ve görünümünüzü geliştirebilir."
            ),
            "overweight": (
                "Kategoriniz Fazla Kilolu. Sürdürülebilir bir kalori açığı ve düzenli "
                "antrenmanla yağ kaybına odaklanmanız önemli sağlık kazanımları sağlar."
            ),
            "obese": (
                "Kategoriniz Obez. Uzun vadeli sağlığınız ve risklerin azaltılması için "
                "profesyonel destekle yağ kaybına öncelik vermeniz çok önemlidir."
            ),
        },
        "methods_title": "Tahmin Yöntemleri",
        "abbreviations_title": "Kısaltmalar",
        "methods": {
            "bmi_based": {
                "name": "BMI Tabanlı YO% (Deurenberg)",
                "note": "BMI, yaş ve cinsiyet kullanır. Sporcularda daha az doğrudur.",
            },
            "navy": {
                "name": "ABD Donanması YO% (Mezura)",
                "note": "Boy, boyun, bel (kadınlarda kalça) kullanır. Sıklıkla yanılabilir.",
            },
            "relative_fat_mass": {
                "name": "RFM YO% (Mezura)",
                "note": "Boy ve bel kullanır. Daha basit mezura yöntemi.",
            },
            "cun_bae": {
                "name": "CUN-BAE YO%",
                "note": "BMI, yaş, cinsiyet (E=0, K=1) kullanır. Karmaşık formül.",
            },
            "ecore": {
                "name": "ECORE-BF YO%",
                "note": "Yaş, cinsiyet (E=0, K=1) ve Ln(BMI) kullanır.",
            },
        },
        "abbreviations": [
            ("YO%", "Vücut Yağ Oranı"),
            ("BMI", "Vücut Kitle İndeksi"),
            ("RFM", "Göreli Yağ Kütlesi"),
            ("CUN-BAE", "Navarra Tahmincisi"),
            ("ECORE", "ECORE Tahmincisi"),
            ("kg/cm", "Metrik Birimler"),
            ("lbs/ft/in", "İngiliz Birimleri"),
        ],
    },
}


def available_locales() -> list:
    return list(STRINGS.keys())


def get_strings(locale: str = DEFAULT_LOCALE) -> dict:
    """String table for a locale, English when the locale is unknown."""
    return STRINGS.get(locale, STRINGS["en"])


def _format_bound(value: float) -> str:
    return format_for_input(value, 1 if value % 1 != 0 else 0)


def format_error(error, strings: dict) -> str:
    """Render a ValidationError in the given string table."""
    template = strings["errors"][error.kind]
    if error.kind == "out_of_range":
        return template.format(min=_format_bound(error.min_value), max=_format_bound(error.max_value))
    return template
