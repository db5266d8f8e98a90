# components/i18n.py
# UI strings for every supported language. Lookups fall back to the key itself.

from typing import Dict

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "es": {
        "tagline": "Herramientas gratuitas para tomar el control de tu futuro financiero.",
        "settings": "Preferencias",
        "language": "Idioma",
        "darkMode": "Modo oscuro",
        "years": "Años",
        "download_csv": "⬇️ CSV (tabla anual)",
        "download_pdf": "⬇️ Informe PDF",
        # tabs
        "tab_compound": "Interés Compuesto",
        "tab_salary": "Salario Neto",
        "tab_fire": "Calculadora FIRE",
        "tab_pension": "Duración Pensión",
        "title_compound": "Calculadora de Interés Compuesto",
        "title_salary": "Calculadora de Salario Neto",
        "title_fire": "Simulador de Independencia Financiera (FIRE)",
        "title_pension": "Simulador de Retiro y Longevidad",
        # compound
        "investmentParams": "Parámetros de Inversión",
        "initialInvestment": "Inversión Inicial",
        "monthlyContribution": "Aportación Mensual",
        "annualReturn": "Retorno Anual Estimado (%)",
        "sp500Tooltip": "La media histórica del S&P500 es aprox 8-10%.",
        "timeHorizon": "Horizonte Temporal (años)",
        "wealthProjection": "Proyección de Patrimonio",
        "finalCapital": "Capital Final",
        "yourContributions": "Tus Aportaciones",
        "generatedProfit": "Beneficio Generado",
        "principal": "Principal",
        "interest": "Interés",
        # salary
        "personalData": "Datos Personales",
        "grossSalary": "Salario Bruto Anual",
        "payments": "Número de Pagas",
        "age": "Edad",
        "disability": "Discapacidad (%)",
        "dependents": "Descendientes y Ascendientes",
        "addDependent": "➕ Añadir familiar",
        "dependentAge": "Edad",
        "dependentKind": "Tipo",
        "descendant": "Descendiente",
        "ascendant": "Ascendiente",
        "noDependents": "Sin familiares a cargo.",
        "netAnnual": "Salario Neto Anual",
        "netMonthly": "Salario Neto Mensual",
        "taxAmount": "Retención IRPF",
        "socialSecurity": "Seguridad Social",
        "effectiveRate": "Tipo de Retención",
        "salaryBreakdown": "Reparto del Salario Bruto",
        # fire
        "proTip": "Consejo Pro",
        "fireTip": "La independencia financiera se logra cuando tus inversiones cubren tus gastos.",
        "annualExpenses": "Gastos Anuales Necesarios",
        "currentNetWorth": "Patrimonio Actual",
        "monthlySavings": "Ahorro Mensual",
        "realReturn": "Retorno Anual Esperado (Real, %)",
        "realReturnTooltip": "Rentabilidad media de la bolsa (8%) menos inflación media (3%) = 5%.",
        "withdrawalRate": "Tasa de Retiro (%)",
        "fireNumber": "Tu Número de Libertad",
        "timeToRetire": "Tiempo estimado para jubilarte",
        "never": "Nunca (Aumenta tu ahorro)",
        "fireProgress": "Camino hacia tu Número FIRE",
        # pension
        "pensionIntro": "Calcula cuánto durarán tus ahorros complementando tu pensión pública.",
        "savingsAtRetirement": "Ahorro Acumulado al Jubilarse",
        "desiredMonthlySpend": "Gasto Mensual Deseado",
        "publicPension": "Pensión Pública Estimada",
        "inflation": "Inflación Estimada (%)",
        "savingsReturn": "Rentabilidad Ahorros (%)",
        "monthlyGap": "Déficit Mensual a Cubrir",
        "moneyLasts": "El dinero te durará",
        "infinite": "Infinito",
        "sustainableMsg": "¡Enhorabuena! Tus ahorros cubren un retiro estándar.",
        "unsustainableMsg": "Precaución: Podrías quedarte sin fondos en vida.",
        "savingsDrawdown": "Evolución de tus Ahorros",
    },
    "en": {
        "tagline": "Free tools to take control of your financial future.",
        "settings": "Settings",
        "language": "Language",
        "darkMode": "Dark mode",
        "years": "Years",
        "download_csv": "⬇️ CSV (yearly table)",
        "download_pdf": "⬇️ PDF report",
        "tab_compound": "Compound Interest",
        "tab_salary": "Net Salary",
        "tab_fire": "FIRE Calculator",
        "tab_pension": "Pension Longevity",
        "title_compound": "Compound Interest Calculator",
        "title_salary": "Net Salary Calculator",
        "title_fire": "Financial Independence (FIRE) Simulator",
        "title_pension": "Retirement and Longevity Simulator",
        "investmentParams": "Investment Parameters",
        "initialInvestment": "Initial Investment",
        "monthlyContribution": "Monthly Contribution",
        "annualReturn": "Estimated Annual Return (%)",
        "sp500Tooltip": "The S&P500 historical average is roughly 8-10%.",
        "timeHorizon": "Time Horizon (years)",
        "wealthProjection": "Wealth Projection",
        "finalCapital": "Final Capital",
        "yourContributions": "Your Contributions",
        "generatedProfit": "Generated Profit",
        "principal": "Principal",
        "interest": "Interest",
        "personalData": "Personal Data",
        "grossSalary": "Gross Annual Salary",
        "payments": "Number of Payments",
        "age": "Age",
        "disability": "Disability (%)",
        "dependents": "Descendants and Ascendants",
        "addDependent": "➕ Add dependent",
        "dependentAge": "Age",
        "dependentKind": "Kind",
        "descendant": "Descendant",
        "ascendant": "Ascendant",
        "noDependents": "No dependents.",
        "netAnnual": "Net Annual Salary",
        "netMonthly": "Net Monthly Salary",
        "taxAmount": "Income Tax Withheld",
        "socialSecurity": "Social Security",
        "effectiveRate": "Withholding Rate",
        "salaryBreakdown": "Gross Salary Breakdown",
        "proTip": "Pro Tip",
        "fireTip": "Financial independence is reached when your investments cover your expenses.",
        "annualExpenses": "Required Annual Expenses",
        "currentNetWorth": "Current Net Worth",
        "monthlySavings": "Monthly Savings",
        "realReturn": "Expected Annual Return (Real, %)",
        "realReturnTooltip": "Average stock return (8%) minus average inflation (3%) = 5%.",
        "withdrawalRate": "Withdrawal Rate (%)",
        "fireNumber": "Your Freedom Number",
        "timeToRetire": "Estimated time to retire",
        "never": "Never (Increase your savings)",
        "fireProgress": "Path to your FIRE Number",
        "pensionIntro": "Find out how long your savings last on top of your public pension.",
        "savingsAtRetirement": "Savings at Retirement",
        "desiredMonthlySpend": "Desired Monthly Spend",
        "publicPension": "Estimated Public Pension",
        "inflation": "Estimated Inflation (%)",
        "savingsReturn": "Savings Return (%)",
        "monthlyGap": "Monthly Gap to Cover",
        "moneyLasts": "Your money will last",
        "infinite": "Infinite",
        "sustainableMsg": "Congratulations! Your savings cover a standard retirement.",
        "unsustainableMsg": "Caution: You might run out of funds in your lifetime.",
        "savingsDrawdown": "Savings Over Time",
    },
}


def t(key: str, language: str = "es") -> str:
    """Translate ``key``; unknown languages and keys return the key unchanged."""
    return TRANSLATIONS.get(language, {}).get(key, key)


def format_money(value: float) -> str:
    return f"${value:,.0f}"


def format_years(years: float, language: str = "es", exceeds: bool = False) -> str:
    if years == float("inf"):
        return t("infinite", language)
    label = t("years", language)
    if exceeds:
        return f"+{years:.0f} {label}"
    return f"{years:.1f} {label}"
