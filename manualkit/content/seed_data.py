"""Initial manual content written on first start."""

INITIAL_PAGES: list[dict] = [
    {"id": "home", "title": "Página Inicial", "icon": "HomeIcon"},
    {
        "id": "diretrizes",
        "title": "Diretrizes da Empresa",
        "icon": "BookOpenIcon",
        "children": [
            {
                "id": "etica-e-conduta",
                "title": "Ética e Conduta",
                "icon": "ShieldCheckIcon",
                "content": [
                    {"id": "c1", "type": "h1", "content": "Ética e Conduta Profissional"},
                    {"id": "c2", "type": "p", "content": (
                        "Todos os colaboradores devem agir de maneira ética, respeitando os valores "
                        "da empresa e as normas legais aplicáveis. As seguintes práticas devem ser observadas:"
                    )},
                    {"id": "c3", "type": "ul", "content": [
                        "Respeito no ambiente de trabalho: Promover um ambiente inclusivo, livre de "
                        "discriminação, assédio ou comportamentos inadequados.",
                        "Confidencialidade: Proteger informações sensíveis da empresa, clientes e parceiros.",
                        "Conflitos de interesse: Evitar situações que possam comprometer a imparcialidade "
                        "ou integridade profissional.",
                    ]},
                ],
            },
            {
                "id": "sustentabilidade",
                "title": "Sustentabilidade",
                "icon": "GlobeAltIcon",
                "content": [
                    {"id": "c1", "type": "h1", "content": "Sustentabilidade"},
                    {"id": "c2", "type": "p", "content": (
                        "A empresa está comprometida com práticas que minimizem impactos ambientais. "
                        "Todos os colaboradores devem:"
                    )},
                    {"id": "c3", "type": "ul", "content": [
                        "Seguir corretamente os procedimentos para descarte de resíduos.",
                        "Identificar oportunidades para implementar práticas sustentáveis nos processos operacionais.",
                    ]},
                ],
            },
            {
                "id": "gestao-de-riscos",
                "title": "Gestão de Riscos",
                "icon": "BoltIcon",
                "content": [
                    {"id": "c1", "type": "h1", "content": "Gestão de Riscos"},
                    {"id": "c2", "type": "p", "content": (
                        "Para garantir continuidade operacional e minimizar impactos negativos, é "
                        "essencial adotar práticas proativas de gestão de riscos:"
                    )},
                    {"id": "c3", "type": "ol", "content": [
                        "Identificação de riscos: Mapear possíveis cenários que possam afetar os processos da empresa.",
                        "Mitigação: Implementar medidas preventivas para reduzir a probabilidade ou impacto dos riscos.",
                        "Resposta a incidentes: Definir planos de ação claros para lidar com problemas inesperados.",
                        "Monitoramento contínuo: Revisar regularmente os riscos e atualizar os planos.",
                    ]},
                ],
            },
        ],
    },
    {
        "id": "faturamento",
        "title": "Faturamento",
        "icon": "ScaleIcon",
        "children": [
            {
                "id": "pedido-venda",
                "title": "Pedido de Venda",
                "icon": "ClipboardDocumentListIcon",
                "content": [
                    {"id": "fv1", "type": "h1", "content": "Pedido de Venda"},
                    {"id": "fv2", "type": "p", "content": (
                        "O pedido de venda é o registro formal de uma solicitação feita por um cliente. "
                        "É fundamental para garantir que os produtos ou serviços sejam fornecidos de "
                        "acordo com as condições acordadas."
                    )},
                    {"id": "fv3", "type": "h2", "content": "Campos Principais para Cadastro"},
                    {"id": "fv4", "type": "ul", "content": [
                        "Empresa e Filial: Indique a responsável pela emissão da nota fiscal.",
                        "Cliente: Selecione o cliente.",
                        "Produto e Quantidade: Informe o produto solicitado e a quantidade desejada.",
                        "Condições de Pagamento: Defina conforme acordado com o cliente.",
                    ]},
                ],
            },
            {
                "id": "emissao-notas",
                "title": "Emissão de Notas Fiscais",
                "icon": "DocumentTextIcon",
                "content": [
                    {"id": "en1", "type": "h1", "content": "Emissão de Notas Fiscais"},
                    {"id": "en2", "type": "p", "content": (
                        "A emissão de notas fiscais integra informações do pedido de compra com as "
                        "ordens de carga (O.C)."
                    )},
                    {"id": "en3", "type": "alert_warning", "content": (
                        "Qualquer pedido criado de forma incorreta poderá gerar erros nas etapas "
                        "subsequentes, resultando em inconsistências no faturamento."
                    )},
                ],
            },
        ],
    },
    {
        "id": "logistica",
        "title": "Logística",
        "icon": "TruckIcon",
        "children": [
            {
                "id": "fechamento-frete",
                "title": "Fechamento de Frete",
                "icon": "WrenchScrewdriverIcon",
                "content": [
                    {"id": "lg1", "type": "h1", "content": "Fechamento de Frete (Terceiro)"},
                    {"id": "lg2", "type": "p", "content": (
                        "Processo essencial para garantir a correta apuração dos custos logísticos e a "
                        "precisão nos relatórios financeiros."
                    )},
                    {"id": "lg3", "type": "alert_info", "content": (
                        "Fórmula: Tonelada × Distancia em KM × Valor pago por KM."
                    )},
                ],
            },
        ],
    },
    {"id": "faq", "title": "FAQ", "icon": "QuestionMarkCircleIcon"},
    {"id": "contato", "title": "Contato", "icon": "EnvelopeIcon"},
]


INITIAL_FAQS: list[dict] = [
    {
        "id": "faq1",
        "question": "Como faço para cadastrar um novo cliente?",
        "answer": (
            "Para cadastrar um novo cliente, acesse a seção de Faturamento > Pedido de Venda e siga "
            "as instruções para preenchimento dos dados do cliente. Certifique-se de ter todos os "
            "documentos necessários em mãos."
        ),
    },
    {
        "id": "faq2",
        "question": "O que fazer em caso de falha no sistema durante a emissão de uma nota fiscal?",
        "answer": (
            "Consulte a página de Emissão de Notas Fiscais. O procedimento padrão é registrar os "
            "dados em uma planilha e emitir a nota manualmente, para posterior inserção no sistema pelo T.I."
        ),
    },
    {
        "id": "faq3",
        "question": "Qual é a política para descarte de resíduos de escritório?",
        "answer": (
            "A política de descarte está detalhada na seção de Sustentabilidade. Resumidamente, separe "
            "o lixo orgânico do reciclável e utilize os coletores específicos para cada tipo de material."
        ),
    },
]
